"""Export artifacts as standalone ``.html`` files."""

from __future__ import annotations

import html
import re
from pathlib import Path
from typing import Iterable, List, Optional

from cardforge.exceptions import ExportError
from cardforge.extract.models import Artifact
from cardforge.utils.logging import get_logger

logger = get_logger(__name__)

_UNSAFE_FILENAME_CHARS = re.compile(r'[\\/:*?"<>|]')
_DOCUMENT_START_RE = re.compile(r"^\s*(<!DOCTYPE|<html)", re.IGNORECASE)

_DOCUMENT_SHELL = """<!DOCTYPE html>
<html>
<head>
<meta charset="UTF-8">
<title>{title}</title>
</head>
<body style="margin:0;padding:0;">
{code}
</body>
</html>"""


def full_html(artifact: Artifact) -> str:
    """Return *artifact* as a complete document, wrapping bare fragments."""
    code = artifact.code.strip()
    if _DOCUMENT_START_RE.match(code):
        return code
    return _DOCUMENT_SHELL.format(title=html.escape(artifact.title), code=code)


def safe_filename(title: str, index: Optional[int] = None) -> str:
    """Build a filesystem-safe ``.html`` name from *title*.

    When *index* (zero-based) is given the name is prefixed with its
    two-digit, 1-based position, e.g. ``03_Pricing.html``.
    """
    stem = _UNSAFE_FILENAME_CHARS.sub("_", title).strip() or "design"
    prefix = f"{index + 1:02d}_" if index is not None else ""
    return f"{prefix}{stem}.html"


def export_artifacts(
    artifacts: Iterable[Artifact],
    out_dir: Path,
    numbering: bool = True,
) -> List[Path]:
    """Write each artifact to *out_dir* and return the written paths in order.

    Clashing names get ``-2``, ``-3``, ... suffixes rather than overwriting
    each other.

    Raises:
        ExportError: If *out_dir* exists and is not a directory.
    """
    out_dir = Path(out_dir)
    if out_dir.exists() and not out_dir.is_dir():
        raise ExportError(f"Output path is not a directory: {out_dir}")
    out_dir.mkdir(parents=True, exist_ok=True)

    written: List[Path] = []
    used: set[str] = set()
    for i, artifact in enumerate(artifacts):
        name = safe_filename(artifact.title, i if numbering else None)
        stem = name[: -len(".html")]
        n = 2
        while name in used:
            name = f"{stem}-{n}.html"
            n += 1
        used.add(name)

        path = out_dir / name
        path.write_text(full_html(artifact), encoding="utf-8")
        logger.info("Wrote %s", path)
        written.append(path)
    return written
