"""Data models for the extraction pipeline."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class Artifact:
    """One independently downloadable/renderable HTML document."""

    id: str
    code: str
    title: str
    type: str = "html"

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ParsedPreview:
    """Style text and body markup of an artifact, rescoped for embedding."""

    styles: str
    body_content: str
