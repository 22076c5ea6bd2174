"""Preview scoping: makes an artifact safe to embed inside another page."""

from __future__ import annotations

import re
from typing import Optional

from cardforge.extract.document import parse_document
from cardforge.extract.models import Artifact, ParsedPreview

# `body` at a selector start: beginning of text, or after "}" or ",".
_BODY_SELECTOR_RE = re.compile(r"(^|[},])(\s*)body(?![\w-])")


def scope_styles(styles: str, wrapper_id: str) -> str:
    """Retarget ``body`` selectors in *styles* at ``#wrapper_id``.

    This is a textual rewrite of selector-start positions only; ``body``
    anywhere else (class names, property values) is left alone.
    """
    return _BODY_SELECTOR_RE.sub(lambda m: f"{m.group(1)}{m.group(2)}#{wrapper_id}", styles)


def parse_for_preview(code: str, wrapper_id: str) -> ParsedPreview:
    """Split *code* into scoped style text and body markup.

    Never fails: unparseable input just yields empty strings.
    """
    document = parse_document(code)
    styles = "\n".join(style.inner_html for style in document.styles())
    return ParsedPreview(
        styles=scope_styles(styles, wrapper_id),
        body_content=document.body.inner_html,
    )


def render_preview(
    artifact: Artifact,
    wrapper_id: Optional[str] = None,
    width: int = 1080,
    height: int = 1080,
) -> str:
    """Return an embeddable ``<style>`` + fixed-size ``<div>`` fragment for *artifact*."""
    wrapper_id = wrapper_id or f"preview-{artifact.id}"
    preview = parse_for_preview(artifact.code, wrapper_id)
    return (
        f"<style>{preview.styles}</style>\n"
        f'<div id="{wrapper_id}" style="position:relative; overflow:hidden; '
        f'width:{width}px; height:{height}px;">\n'
        f"{preview.body_content}\n"
        "</div>"
    )
