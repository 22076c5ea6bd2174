"""Card splitting: turns HTML blocks into one or more :class:`Artifact` records.

A block whose body holds several sibling elements (directly, or inside a
single collection-like wrapper) is treated as a bundle of cards/slides and
split into one standalone document per element.  Everything else passes
through as a single artifact.
"""

from __future__ import annotations

import re
import uuid
from typing import List

from cardforge.extract.blocks import extract_blocks
from cardforge.extract.document import Element, parse_document
from cardforge.extract.models import Artifact
from cardforge.extract.titles import fallback_title, resolve_block_title, resolve_card_title
from cardforge.utils.logging import get_logger

logger = get_logger(__name__)

# ---------------------------------------------------------------------------
# Wrapper-peel heuristics
# ---------------------------------------------------------------------------
_WRAPPER_NAME_RE = re.compile(r"wrapper|container|list|grid|group|collection")
_CARD_CHILD_CLASS_RE = re.compile(r"card|slide|page|section|item")
# Hyphens are word boundaries here, so "card-wrapper" matches as well.
_CARD_NAME_RE = re.compile(r"\bcard\b")
_SECTION_TAGS = frozenset({"section", "article", "aside"})

_SPLIT_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
  <meta charset="UTF-8">
  {head}
</head>
<body style="margin:0; padding:0; background: transparent;">
  {body}
</body>
</html>"""


def _new_id(kind: str) -> str:
    return f"artifact-{kind}-{uuid.uuid4().hex}"


def _should_descend(container: Element, inner: List[Element]) -> bool:
    """Decide whether a lone *container* bundles its *inner* children as cards."""
    class_name = container.class_name.lower()

    is_wrapper_name = bool(_WRAPPER_NAME_RE.search(class_name))
    children_have_card_class = any(
        _CARD_CHILD_CLASS_RE.search(child.class_name.lower()) for child in inner
    )
    children_are_sections = all(child.tag in _SECTION_TAGS for child in inner)
    is_card_name = bool(_CARD_NAME_RE.search(class_name))

    if is_wrapper_name:
        return True
    # A container named "card" is one card's own structure (header/body...).
    return (children_have_card_class or children_are_sections) and not is_card_name


def find_split_targets(body: Element) -> List[Element]:
    """Return the elements of *body* that would each become one artifact."""
    targets = body.meaningful_children
    if len(targets) == 1:
        container = targets[0]
        inner = container.meaningful_children
        if len(inner) > 1 and _should_descend(container, inner):
            logger.debug("Peeling wrapper %r into %d targets", container, len(inner))
            targets = inner
    return targets


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def split_block(block: str, block_index: int) -> List[Artifact]:
    """Split one HTML *block* into artifacts.

    Args:
        block: The block markup, as returned by :func:`extract_blocks`.
        block_index: Zero-based position of the block in the input; used for
            the fallback ``Artifact {n}`` title.

    Returns:
        One artifact per detected card when the block bundles two or more,
        otherwise a single artifact carrying *block* unchanged.  A block that
        fails to parse or split degrades to a single ``"unknown"`` artifact
        instead of raising.
    """
    try:
        document = parse_document(block)
        targets = find_split_targets(document.body)

        if len(targets) > 1:
            head_html = document.head_html
            logger.debug("Splitting block %d into %d cards", block_index, len(targets))
            return [
                Artifact(
                    id=_new_id("split"),
                    code=_SPLIT_TEMPLATE.format(head=head_html, body=target.outer_html),
                    title=resolve_card_title(target, i),
                )
                for i, target in enumerate(targets, start=1)
            ]

        return [
            Artifact(
                id=_new_id("block"),
                code=block,
                title=resolve_block_title(block, block_index),
            )
        ]
    except Exception as exc:
        logger.warning("Error splitting HTML block %d: %s", block_index, exc)
        return [
            Artifact(
                id=_new_id("err"),
                code=block,
                title=fallback_title(block_index),
                type="unknown",
            )
        ]


def extract_artifacts(text: str) -> List[Artifact]:
    """Extract every artifact from free-form *text*, in source order.

    Returns ``[]`` when *text* contains no recognisable HTML; reporting that
    to the user is the caller's job.
    """
    artifacts: List[Artifact] = []
    for block_index, block in enumerate(extract_blocks(text)):
        artifacts.extend(split_block(block, block_index))
    return artifacts
