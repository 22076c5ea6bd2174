"""Extraction package: HTML block detection, card splitting and preview scoping."""

from cardforge.extract.blocks import extract_blocks
from cardforge.extract.document import parse_document
from cardforge.extract.models import Artifact, ParsedPreview
from cardforge.extract.preview import parse_for_preview, render_preview
from cardforge.extract.splitter import extract_artifacts, split_block

__all__ = [
    "extract_artifacts",
    "extract_blocks",
    "split_block",
    "parse_document",
    "parse_for_preview",
    "render_preview",
    "Artifact",
    "ParsedPreview",
]
