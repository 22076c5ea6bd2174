"""Card Forge: splits HTML found in free-form text into standalone card documents."""

from cardforge.extract import Artifact, ParsedPreview, extract_artifacts, parse_for_preview

__version__ = "0.1.0"

__all__ = ["extract_artifacts", "parse_for_preview", "Artifact", "ParsedPreview"]
