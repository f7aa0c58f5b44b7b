"""Property-based fuzzing tests for the converters.

This test module uses Hypothesis to generate Markdown and text inputs and
checks that parsing and rendering are total and keep their structural
guarantees across a wide range of inputs.

Test Coverage:
- Parsing arbitrary Markdown never fails and never yields an empty doc
- Parsed trees contain no empty text runs and no bare inline list items
- Code runs carry no formatting marks
- Rendering parsed trees to Markdown and HTML never fails
- Text is always escaped in HTML output
"""

from html import escape

import pytest
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from adf2md.ast import Code, Doc, Link, ListItem, Paragraph, Text, get_node_children
from adf2md.parsers.markdown import markdown_to_adf
from adf2md.renderers.html import adf_to_html
from adf2md.renderers.markdown import adf_to_markdown
from adf2md.utils.html_utils import is_url_safe

MARKDOWN_FRAGMENTS = [
    "# ", "## ", "- ", "* ", "1. ", "3) ", "> ", "```", "`", "**", "*", "_", "~~",
    "[", "]", "(", ")", "](https://example.com)", "<", ">", "|", "---", "\n", "\n\n",
    "  \n", "    ", "text", "word ", "![alt](x.png)", "<b>", "</b>", "\\", "&amp;",
]

markdown_text = st.one_of(
    st.text(max_size=200),
    st.lists(st.sampled_from(MARKDOWN_FRAGMENTS), max_size=40).map("".join),
)


def _walk(node):
    yield node
    for child in get_node_children(node):
        yield from _walk(child)


@pytest.mark.unit
@pytest.mark.fuzzing
class TestConversionFuzzing:
    """Property-based tests for parsing and rendering."""

    @given(markdown_text)
    @settings(suppress_health_check=[HealthCheck.function_scoped_fixture], deadline=None)
    def test_parsing_is_total(self, markdown):
        """Test that any input yields a document with at least one block."""
        doc = markdown_to_adf(markdown)

        assert isinstance(doc, Doc)
        assert len(doc.content) >= 1

    @given(markdown_text)
    @settings(suppress_health_check=[HealthCheck.function_scoped_fixture], deadline=None)
    def test_parsed_tree_invariants(self, markdown):
        """Test structural guarantees of parsed trees."""
        for node in _walk(markdown_to_adf(markdown)):
            if isinstance(node, Text):
                assert node.text != ""
                if any(isinstance(mark, Code) for mark in node.marks):
                    assert all(isinstance(mark, (Code, Link)) for mark in node.marks)
            if isinstance(node, ListItem):
                assert node.content
                assert not any(isinstance(child, Text) for child in node.content)

    @given(markdown_text)
    @settings(suppress_health_check=[HealthCheck.function_scoped_fixture], deadline=None)
    def test_rendering_parsed_tree_is_total(self, markdown):
        """Test that parsed trees always render to both formats."""
        doc = markdown_to_adf(markdown)

        assert isinstance(adf_to_markdown(doc), str)
        assert isinstance(adf_to_html(doc), str)

    @given(st.text(max_size=100))
    def test_html_text_is_escaped(self, text):
        """Test that plain text is always escaped in HTML output."""
        html = adf_to_html(Doc(content=[Paragraph(content=[Text(text=text)])]))
        assert html == f"<p>{escape(text)}</p>\n"

    @given(st.text(max_size=50))
    def test_javascript_urls_never_safe(self, suffix):
        """Test that javascript: URLs are rejected whatever follows."""
        assert not is_url_safe(f"javascript:{suffix}")
        assert not is_url_safe(f"JavaScript:{suffix}")
