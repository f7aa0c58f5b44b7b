#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for adf2md converters.

Each converter has its own frozen Options dataclass; parsers and renderers
validate that they were given the right class.
"""

from __future__ import annotations

from adf2md.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from adf2md.options.html import HtmlRendererOptions
from adf2md.options.markdown import MarkdownParserOptions, MarkdownRendererOptions

__all__ = [
    "CloneFrozenMixin",
    "BaseParserOptions",
    "BaseRendererOptions",
    "MarkdownParserOptions",
    "MarkdownRendererOptions",
    "HtmlRendererOptions",
]
