"""Display titles for extracted artifacts."""

from __future__ import annotations

import re

from cardforge.extract.document import Element

MAX_TITLE_LENGTH = 30
ELLIPSIS = "..."

# Only a bare <title> tag counts; attributes or line breaks inside it do not.
_TITLE_TAG_RE = re.compile(r"<title>(.*?)</title>", re.IGNORECASE)


def truncate_title(title: str) -> str:
    """Cut *title* to :data:`MAX_TITLE_LENGTH` characters plus an ellipsis."""
    if len(title) > MAX_TITLE_LENGTH:
        return title[:MAX_TITLE_LENGTH] + ELLIPSIS
    return title


def resolve_card_title(element: Element, index: int) -> str:
    """Title for one split card.

    Tries, in order: the text of the first ``h1``/``h2``/``h3`` inside
    *element*, its ``title`` attribute, its ``aria-label`` attribute, and
    finally ``Card {index}`` (*index* is 1-based).  Blank values are skipped.
    """
    heading = element.find_first("h1, h2, h3")
    title = (
        (heading.text.strip() if heading is not None else "")
        or (element.attr("title") or "").strip()
        or (element.attr("aria-label") or "").strip()
        or f"Card {index}"
    )
    return truncate_title(title)


def resolve_block_title(block: str, block_index: int) -> str:
    """Title for an unsplit block: its ``<title>`` text, else ``Artifact {n}``."""
    match = _TITLE_TAG_RE.search(block)
    title = match.group(1).strip() if match else ""
    if title:
        return truncate_title(title)
    return fallback_title(block_index)


def fallback_title(block_index: int) -> str:
    return f"Artifact {block_index + 1}"
