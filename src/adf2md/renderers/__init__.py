#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adf2md/renderers/__init__.py
"""Renderers for converting ADF trees to output formats.

Available renderers:
- MarkdownRenderer: Render to Markdown text
- HtmlRenderer: Render to an HTML fragment or standalone document

Examples
--------
    >>> from adf2md.ast import Doc, Heading, Text
    >>> from adf2md.renderers import MarkdownRenderer
    >>> doc = Doc(content=[Heading(level=2, content=[Text(text="Title")])])
    >>> MarkdownRenderer().render_to_string(doc)
    '## Title'

"""

from adf2md.renderers.base import BaseRenderer, InlineContentMixin
from adf2md.renderers.html import HtmlRenderer, adf_to_html
from adf2md.renderers.markdown import MarkdownRenderer, adf_to_markdown

__all__ = [
    "BaseRenderer",
    "InlineContentMixin",
    "HtmlRenderer",
    "MarkdownRenderer",
    "adf_to_html",
    "adf_to_markdown",
]
