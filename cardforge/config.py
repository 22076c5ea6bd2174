"""Centralised settings for the Card Forge exporter and CLI.

Values can be overridden via environment variables or a `.env` file in the
project root (loaded automatically when this module is imported).  The
extraction core never reads these; only ``cardforge.export`` and ``cli`` do.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (one level up from this package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


def _env_flag(name: str, default: str) -> bool:
    return os.environ.get(name, default).strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------
    output_dir: Path = field(
        default_factory=lambda: Path(
            os.environ.get("CARDFORGE_OUTPUT_DIR", "cardforge_out")
        )
    )
    numbering: bool = field(
        default_factory=lambda: _env_flag("CARDFORGE_NUMBERING", "true")
    )

    # ------------------------------------------------------------------
    # Preview container
    # ------------------------------------------------------------------
    preview_width: int = field(
        default_factory=lambda: int(os.environ.get("CARDFORGE_PREVIEW_WIDTH", "1080"))
    )
    preview_height: int = field(
        default_factory=lambda: int(os.environ.get("CARDFORGE_PREVIEW_HEIGHT", "1080"))
    )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = field(
        default_factory=lambda: os.environ.get("CARDFORGE_LOG_LEVEL", "WARNING")
    )


# Module-level singleton, import this everywhere:
#   from cardforge.config import settings
settings = Settings()
