"""Lenient HTML parsing into a small read-only tree.

BeautifulSoup with the ``html5lib`` builder parses the way a browser does:
unclosed tags are closed, ``<html>``/``<head>``/``<body>`` are always
synthesised, tables get their ``<tbody>``, and malformed input never
raises.  :class:`Element` wraps a parsed tag with just the queries the
splitter and preview scoper need.
"""

from __future__ import annotations

from typing import List, Optional

from bs4 import BeautifulSoup, Tag

# Tags that never count as a visual unit of their own.
NON_VISUAL_TAGS = frozenset({"script", "style", "link", "meta", "br", "noscript", "template"})


def _attr_text(value: object) -> Optional[str]:
    # bs4 hands multi-valued attributes (class, rel, ...) back as lists.
    if value is None:
        return None
    if isinstance(value, list):
        return " ".join(value)
    return str(value)


class Element:
    """Read-only view over one parsed element."""

    __slots__ = ("_node",)

    def __init__(self, node: Tag) -> None:
        self._node = node

    def __repr__(self) -> str:
        return f"Element(<{self.tag}> class={self.class_name!r})"

    @property
    def tag(self) -> str:
        return (self._node.name or "").lower()

    @property
    def class_name(self) -> str:
        """The raw ``class`` attribute text, or ``""``."""
        return _attr_text(self._node.get("class")) or ""

    def attr(self, name: str) -> Optional[str]:
        return _attr_text(self._node.get(name))

    @property
    def text(self) -> str:
        return self._node.get_text()

    @property
    def children(self) -> List[Element]:
        return [Element(child) for child in self._node.find_all(True, recursive=False)]

    @property
    def meaningful_children(self) -> List[Element]:
        """Direct child elements, minus scripts, styles and other non-visual tags."""
        return [child for child in self.children if child.tag not in NON_VISUAL_TAGS]

    def find_first(self, selector: str) -> Optional[Element]:
        """Return the first descendant (document order) matching a CSS *selector*."""
        match = self._node.select_one(selector)
        return Element(match) if match is not None else None

    @property
    def outer_html(self) -> str:
        return str(self._node)

    @property
    def inner_html(self) -> str:
        return self._node.decode_contents()


class ParsedDocument:
    """A parsed block with head/body access."""

    def __init__(self, soup: BeautifulSoup) -> None:
        self._soup = soup

    @property
    def head(self) -> Optional[Element]:
        head = self._soup.head
        return Element(head) if head is not None else None

    @property
    def body(self) -> Element:
        """The ``<body>`` element; an empty, detached one if the parser made none."""
        body = self._soup.body
        return Element(body if body is not None else self._soup.new_tag("body"))

    @property
    def head_html(self) -> str:
        head = self.head
        return head.inner_html if head is not None else ""

    def styles(self) -> List[Element]:
        """Every ``<style>`` element in the document, in document order."""
        return [Element(node) for node in self._soup.find_all("style")]


def parse_document(markup: str) -> ParsedDocument:
    """Parse *markup* leniently and return a :class:`ParsedDocument`."""
    return ParsedDocument(BeautifulSoup(markup, "html5lib"))
