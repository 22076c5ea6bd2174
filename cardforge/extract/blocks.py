"""Block detection: finds candidate HTML document spans in free-form text."""

from __future__ import annotations

import re
from typing import List

# ---------------------------------------------------------------------------
# Detection tiers, tried in order
# ---------------------------------------------------------------------------
_FENCE_RE = re.compile(r"```html(.*?)```", re.IGNORECASE | re.DOTALL)
_RAW_DOCUMENT_RE = re.compile(
    r"<!DOCTYPE html>.*?</html>|<html.*?</html>", re.IGNORECASE | re.DOTALL
)
_TAG_OPEN_RE = re.compile(r"<[a-z].*>", re.IGNORECASE | re.DOTALL)


def _fenced_blocks(text: str) -> List[str]:
    return [m.group(1).strip() for m in _FENCE_RE.finditer(text)]


def _raw_documents(text: str) -> List[str]:
    return [m.group(0).strip() for m in _RAW_DOCUMENT_RE.finditer(text)]


def _bare_fragment(text: str) -> List[str]:
    trimmed = text.strip()
    lowered = trimmed.lower()
    if _TAG_OPEN_RE.search(trimmed) and ("<div" in lowered or "<style" in lowered):
        return [trimmed]
    return []


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def extract_blocks(text: str) -> List[str]:
    """Return the candidate HTML blocks found in *text*, in source order.

    Three tiers are tried in strict priority; the first one that finds
    anything wins:

    1. Markdown fences tagged ``html`` (one block per fence, inner content trimmed).
    2. Raw ``<!DOCTYPE html>…</html>`` / ``<html…>…</html>`` documents.
    3. The whole input, when it looks like a bare markup fragment containing
       a ``<div`` or ``<style`` tag.

    Returns ``[]`` when nothing looks like HTML.
    """
    for tier in (_fenced_blocks, _raw_documents, _bare_fragment):
        blocks = tier(text)
        if blocks:
            return blocks
    return []
