#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/ast/test_adf_serialization.py
"""Unit tests for ADF wire-format serialization."""

import json

import pytest

from adf2md.ast import (
    BackgroundColor,
    CodeBlock,
    Doc,
    Emoji,
    Heading,
    Link,
    Media,
    OrderedList,
    Panel,
    Paragraph,
    Strong,
    SubSup,
    TableHeader,
    Text,
    TextColor,
    UnknownMark,
    UnknownNode,
    adf_to_dict,
    adf_to_json,
    dict_to_adf,
    json_to_adf,
)
from adf2md.exceptions import MalformedDocumentError, ParsingError


@pytest.mark.unit
class TestDictToAdf:
    """Test decoding wire-format objects."""

    def test_simple_document(self):
        """Test decoding a document with a paragraph."""
        node = dict_to_adf(
            {
                "type": "doc",
                "version": 1,
                "content": [{"type": "paragraph", "content": [{"type": "text", "text": "Hello"}]}],
            }
        )

        assert isinstance(node, Doc)
        assert node.content == [Paragraph(content=[Text(text="Hello")])]

    def test_attributes_are_decoded(self):
        """Test decoding of camelCase attributes."""
        panel = dict_to_adf({"type": "panel", "attrs": {"panelType": "warning"}, "content": []})
        emoji = dict_to_adf({"type": "emoji", "attrs": {"shortName": ":smile:", "id": "1f604"}})
        media = dict_to_adf({"type": "media", "attrs": {"id": "abc", "type": "file", "collection": "c"}})
        ordered = dict_to_adf({"type": "orderedList", "attrs": {"order": 5}, "content": []})

        assert panel == Panel(panel_type="warning")
        assert emoji == Emoji(short_name=":smile:", id="1f604")
        assert media == Media(id="abc", media_type="file", collection="c")
        assert ordered == OrderedList(order=5)

    def test_heading_without_level(self):
        """Test that a missing heading level decodes to None."""
        assert dict_to_adf({"type": "heading", "content": []}) == Heading(level=None)

    def test_cell_spans(self):
        """Test decoding of colspan and rowspan."""
        cell = dict_to_adf({"type": "tableHeader", "attrs": {"colspan": 2, "rowspan": 3}, "content": []})
        assert cell == TableHeader(colspan=2, rowspan=3)

    def test_marks_are_decoded(self):
        """Test decoding of every mark kind with attributes."""
        node = dict_to_adf(
            {
                "type": "text",
                "text": "x",
                "marks": [
                    {"type": "strong"},
                    {"type": "link", "attrs": {"href": "https://example.com"}},
                    {"type": "subsup", "attrs": {"type": "sup"}},
                    {"type": "textColor", "attrs": {"color": "#ff0000"}},
                    {"type": "backgroundColor", "attrs": {"color": "#00ff00"}},
                ],
            }
        )

        assert node.marks == [
            Strong(),
            Link(href="https://example.com"),
            SubSup(type="sup"),
            TextColor(color="#ff0000"),
            BackgroundColor(color="#00ff00"),
        ]

    def test_unknown_kinds_are_kept(self):
        """Test that unknown nodes and marks degrade instead of failing."""
        node = dict_to_adf(
            {
                "type": "layoutSection",
                "attrs": {"width": 2},
                "content": [{"type": "text", "text": "x", "marks": [{"type": "annotation", "attrs": {"id": "a"}}]}],
            }
        )

        assert isinstance(node, UnknownNode)
        assert node.kind == "layoutSection"
        assert node.attrs == {"width": 2}
        assert node.content[0].marks == [UnknownMark(type="annotation")]

    def test_non_object_children_are_skipped(self):
        """Test that malformed children are dropped below the root."""
        node = dict_to_adf({"type": "paragraph", "content": ["oops", 3, {"type": "text", "text": "ok"}]})
        assert node.content == [Text(text="ok")]

    def test_code_block_marks_are_stripped(self):
        """Test that text inside code blocks never carries marks."""
        node = dict_to_adf(
            {"type": "codeBlock", "content": [{"type": "text", "text": "x", "marks": [{"type": "strong"}]}]}
        )
        assert node == CodeBlock(content=[Text(text="x")])

    @pytest.mark.parametrize("data", ["doc", 42, None, {}, {"type": 5}, {"content": []}])
    def test_malformed_root_raises(self, data):
        """Test that a root without a string type is rejected."""
        with pytest.raises(MalformedDocumentError):
            dict_to_adf(data)


@pytest.mark.unit
class TestAdfToDict:
    """Test encoding nodes to wire format."""

    def test_doc_always_has_version(self):
        """Test that documents carry attrs.version."""
        assert adf_to_dict(Doc()) == {"type": "doc", "attrs": {"version": 1}, "content": []}

    def test_empty_attrs_and_marks_are_omitted(self):
        """Test compact output for nodes without attributes or marks."""
        assert adf_to_dict(Paragraph(content=[Text(text="x")])) == {
            "type": "paragraph",
            "content": [{"type": "text", "text": "x"}],
        }

    def test_attributes_are_encoded(self):
        """Test encoding of attributes and marks."""
        assert adf_to_dict(Panel(panel_type="error")) == {
            "type": "panel",
            "attrs": {"panelType": "error"},
            "content": [],
        }
        assert adf_to_dict(Text(text="x", marks=[Link(href="u", title="T")])) == {
            "type": "text",
            "text": "x",
            "marks": [{"type": "link", "attrs": {"href": "u", "title": "T"}}],
        }

    def test_unknown_node_is_reencoded(self):
        """Test that unknown nodes keep their raw payload."""
        data = {"type": "status", "attrs": {"text": "DONE", "color": "green"}}
        assert adf_to_dict(dict_to_adf(data)) == data


@pytest.mark.unit
class TestJson:
    """Test JSON helpers."""

    def test_json_to_adf(self):
        """Test decoding JSON text."""
        node = json_to_adf('{"type": "doc", "content": [{"type": "rule"}]}')
        assert isinstance(node, Doc)
        assert node.content[0].kind == "rule"

    def test_invalid_json_raises_parsing_error(self):
        """Test that invalid JSON raises ParsingError."""
        with pytest.raises(ParsingError) as exc_info:
            json_to_adf("{not json")
        assert exc_info.value.parsing_stage == "json_decode"

    def test_adf_to_json_keeps_unicode(self):
        """Test that non-ASCII text is written as-is."""
        text = adf_to_json(Doc(content=[Paragraph(content=[Text(text="café")])]), indent=2)
        assert "café" in text
        assert json.loads(text)["content"][0]["content"][0]["text"] == "café"
