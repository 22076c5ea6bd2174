"""Tests for the lenient document parser and its element wrapper."""

from __future__ import annotations

from bs4 import BeautifulSoup

from cardforge.extract.document import ParsedDocument, parse_document


_FULL_DOCUMENT = """\
<!DOCTYPE html>
<html>
<head>
  <link rel="stylesheet" href="https://fonts.example.com/inter.css">
  <style>.card { color: red; }</style>
</head>
<body>
  <script>console.log('x')</script>
  <div class="card primary" title="Main" aria-label="Main card">
    <div><h2>First</h2></div>
    <h1>Second</h1>
  </div>
  <br>
  <p>Tail</p>
  <style>.tail { color: blue; }</style>
</body>
</html>
"""


class TestParseDocument:
    def test_head_markup_is_exposed(self) -> None:
        doc = parse_document(_FULL_DOCUMENT)
        assert 'href="https://fonts.example.com/inter.css"' in doc.head_html
        assert ".card { color: red; }" in doc.head_html

    def test_bare_fragment_gets_a_body(self) -> None:
        doc = parse_document('<div class="a">x</div>')
        assert doc.body.tag == "body"
        assert [child.tag for child in doc.body.children] == ["div"]

    def test_malformed_markup_does_not_raise(self) -> None:
        doc = parse_document("<div><span>unclosed <b>bold")
        assert doc.body.children[0].tag == "div"
        assert "unclosed" in doc.body.text

    def test_empty_markup_does_not_raise(self) -> None:
        doc = parse_document("")
        assert doc.body.children == []
        assert doc.body.inner_html == ""

    def test_tables_get_an_implicit_tbody(self) -> None:
        doc = parse_document("<table><tr><td>A</td></tr><tr><td>B</td></tr></table>")
        table = doc.body.children[0]
        assert [child.tag for child in table.children] == ["tbody"]

    def test_missing_body_is_empty_not_the_whole_document(self) -> None:
        # html.parser never synthesises a <body>
        doc = ParsedDocument(BeautifulSoup("<head><style>.a{}</style></head>", "html.parser"))
        assert doc.body.tag == "body"
        assert doc.body.inner_html == ""
        assert doc.body.children == []

    def test_styles_in_document_order(self) -> None:
        doc = parse_document(_FULL_DOCUMENT)
        styles = [style.inner_html for style in doc.styles()]
        assert styles == [".card { color: red; }", ".tail { color: blue; }"]


class TestElement:
    def test_meaningful_children_skip_non_visual_tags(self) -> None:
        doc = parse_document(_FULL_DOCUMENT)
        assert [child.tag for child in doc.body.meaningful_children] == ["div", "p"]

    def test_class_name_is_the_raw_attribute_text(self) -> None:
        card = parse_document(_FULL_DOCUMENT).body.meaningful_children[0]
        assert card.class_name == "card primary"

    def test_missing_class_is_empty_string(self) -> None:
        tail = parse_document(_FULL_DOCUMENT).body.meaningful_children[1]
        assert tail.class_name == ""

    def test_attribute_lookup(self) -> None:
        card = parse_document(_FULL_DOCUMENT).body.meaningful_children[0]
        assert card.attr("title") == "Main"
        assert card.attr("aria-label") == "Main card"
        assert card.attr("data-missing") is None

    def test_find_first_uses_document_order(self) -> None:
        card = parse_document(_FULL_DOCUMENT).body.meaningful_children[0]
        heading = card.find_first("h1, h2, h3")
        assert heading is not None
        assert heading.text == "First"

    def test_find_first_returns_none_without_match(self) -> None:
        tail = parse_document(_FULL_DOCUMENT).body.meaningful_children[1]
        assert tail.find_first("h1, h2, h3") is None

    def test_outer_and_inner_html(self) -> None:
        section = parse_document('<section class="card">A <b>B</b></section>').body.children[0]
        assert section.outer_html == '<section class="card">A <b>B</b></section>'
        assert section.inner_html == "A <b>B</b>"
