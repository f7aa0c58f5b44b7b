#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/integration/test_round_trip.py
"""Integration tests across parser, tree model and renderers."""

import json

import pytest

import adf2md
from adf2md import (
    MarkdownParserOptions,
    MarkdownRendererOptions,
    adf_to_html,
    adf_to_markdown,
    markdown_to_adf,
    markdown_to_adf_dict,
    markdown_to_html,
)
from adf2md.ast import Doc, Table, adf_to_json, json_to_adf


@pytest.mark.integration
class TestMarkdownRoundTrip:
    """Test that simple Markdown survives Markdown to ADF to Markdown."""

    @pytest.mark.parametrize(
        "markdown",
        [
            "Plain paragraph",
            "# Title\n\nHello **world**",
            "*it* and ~~gone~~",
            "Use `code` here",
            "[link](https://example.com)",
            "- a\n- b",
            "- a\n  - b",
            "3. x\n4. y",
            "```python\nprint(1)\n```",
            "> quote",
            "---",
            "| a | b |\n| --- | --- |\n| 1 | 2 |",
        ],
    )
    def test_round_trip(self, markdown):
        """Test that rendering the parsed tree reproduces the input."""
        assert adf_to_markdown(markdown_to_adf(markdown)) == markdown

    def test_sample_document(self, sample_markdown):
        """Test a document mixing all supported constructs."""
        doc = markdown_to_adf(sample_markdown)
        kinds = [block.kind for block in doc.content]

        assert kinds == [
            "heading",
            "paragraph",
            "heading",
            "bulletList",
            "orderedList",
            "blockquote",
            "codeBlock",
            "rule",
            "table",
        ]
        assert doc.content[4].order == 3

        markdown = adf_to_markdown(doc)
        assert "- Item 1\n- Item 2\n  - Nested item" in markdown
        assert '```python\ndef hello_world():\n    print("Hello, World!")\n```' in markdown

    def test_wire_format_round_trip(self, sample_markdown):
        """Test that parsed trees survive JSON serialization."""
        doc = markdown_to_adf(sample_markdown)
        assert json_to_adf(adf_to_json(doc)) == doc


@pytest.mark.integration
class TestPublicApi:
    """Test the public conversion functions."""

    def test_markdown_to_html(self):
        """Test the Markdown to HTML convenience function."""
        assert markdown_to_html("Hello **world**") == "<p>Hello <strong>world</strong></p>\n"

    def test_markdown_to_adf_dict(self):
        """Test that the wire format is JSON serializable."""
        data = markdown_to_adf_dict("# Title")

        assert data["type"] == "doc"
        assert data["attrs"] == {"version": 1}
        assert data["content"][0] == {
            "type": "heading",
            "attrs": {"level": 1},
            "content": [{"type": "text", "text": "Title"}],
        }
        json.dumps(data)

    def test_parser_keyword_overrides(self):
        """Test that keyword arguments override parser options."""
        doc = markdown_to_adf("| a |\n| --- |\n| 1 |", parse_tables=False)
        assert not any(isinstance(block, Table) for block in doc.content)

    def test_keyword_overrides_apply_on_top_of_options(self):
        """Test combining an options object with keyword overrides."""
        doc = markdown_to_adf(
            "~~x~~ | a |\n\n| a |\n| --- |\n| 1 |",
            options=MarkdownParserOptions(parse_tables=False),
            parse_strikethrough=False,
        )
        markdown = adf_to_markdown(doc)

        assert "~~x~~" in markdown
        assert not any(isinstance(block, Table) for block in doc.content)

    def test_renderer_keyword_overrides(self):
        """Test that keyword arguments override renderer options."""
        doc = markdown_to_adf("- a\n  - b")

        assert adf_to_markdown(doc, list_indent_width=4) == "- a\n    - b"
        assert adf_to_markdown(doc, MarkdownRendererOptions(bullet_marker="+")) == "+ a\n  + b"

    def test_unknown_keyword_is_ignored(self):
        """Test that unknown keyword overrides are skipped."""
        assert adf_to_markdown(markdown_to_adf("x"), no_such_option=True) == "x"

    def test_html_standalone_keyword(self):
        """Test the standalone override for HTML rendering."""
        html = adf_to_html(markdown_to_adf("x"), standalone=True, title="Issue")

        assert html.startswith("<!DOCTYPE html>")
        assert "<title>Issue</title>" in html

    def test_wire_format_input(self):
        """Test rendering a wire-format document from an external system."""
        tree = {
            "type": "doc",
            "version": 1,
            "content": [
                {
                    "type": "panel",
                    "attrs": {"panelType": "info"},
                    "content": [{"type": "paragraph", "content": [{"type": "text", "text": "Heads up"}]}],
                },
                {"type": "mediaSingle", "content": [{"type": "media", "attrs": {"id": "a1", "type": "file"}}]},
                {"type": "status", "attrs": {"text": "DONE"}},
            ],
        }

        assert adf_to_markdown(tree) == "> **INFO:** Heads up\n\n[Media attachment]\n\n"
        html = adf_to_html(tree, media_map={"a1": "https://example.com/a1.png"})
        assert '<img src="https://example.com/a1.png" class="inline-image" alt="Image">' in html

    def test_package_exports(self):
        """Test the top-level package namespace."""
        assert adf2md.__version__
        assert isinstance(adf2md.markdown_to_adf("x"), Doc)
        assert adf2md.ast.Doc is Doc
