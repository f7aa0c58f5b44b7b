#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adf2md/parsers/__init__.py
"""Parsers that build ADF trees from source text.

Currently Markdown is the only source format; tokenization is delegated to
mistune, which is imported lazily the first time a document is parsed.
"""

from adf2md.parsers.base import BaseParser
from adf2md.parsers.markdown import MarkdownToAdfParser, MarkdownTokenizer, MistuneTokenizer, markdown_to_adf

__all__ = [
    "BaseParser",
    "MarkdownToAdfParser",
    "MarkdownTokenizer",
    "MistuneTokenizer",
    "markdown_to_adf",
]
