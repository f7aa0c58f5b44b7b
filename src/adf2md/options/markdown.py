#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for Markdown parsing and rendering."""
# src/adf2md/options/markdown.py


from __future__ import annotations

from dataclasses import dataclass, field

from adf2md.constants import (
    DEFAULT_BULLET_MARKER,
    DEFAULT_LIST_INDENT_WIDTH,
    DEFAULT_MEDIA_PLACEHOLDER_MARKDOWN,
    DEFAULT_PARSE_STRIKETHROUGH,
    DEFAULT_PARSE_TABLES,
)
from adf2md.options.base import BaseParserOptions, BaseRendererOptions


@dataclass(frozen=True)
class MarkdownParserOptions(BaseParserOptions):
    """Configuration options for Markdown-to-ADF parsing.

    Parameters
    ----------
    parse_strikethrough : bool, default True
        Recognize ``~~text~~`` and map it to the ``strike`` mark
    parse_tables : bool, default True
        Recognize GFM pipe tables and map them to ``table`` nodes

    """

    parse_strikethrough: bool = field(
        default=DEFAULT_PARSE_STRIKETHROUGH,
        metadata={"help": "Parse ~~strikethrough~~ syntax", "importance": "core"},
    )
    parse_tables: bool = field(
        default=DEFAULT_PARSE_TABLES,
        metadata={"help": "Parse GFM pipe tables", "importance": "core"},
    )


@dataclass(frozen=True)
class MarkdownRendererOptions(BaseRendererOptions):
    """Markdown rendering options for converting ADF to Markdown text.

    Parameters
    ----------
    list_indent_width : int, default 2
        Spaces of indentation per list nesting level. The width does not
        follow the marker width, so ``10.`` items nest with the same indent
        as ``-`` items.
    bullet_marker : {"-", "*", "+"}, default "-"
        Marker for bullet list items
    media_placeholder : str, default "[Media attachment]"
        Text emitted for ``media`` and ``mediaSingle`` nodes
    escape_table_pipes : bool, default True
        Escape ``|`` inside table cells so cell boundaries survive

    """

    list_indent_width: int = field(
        default=DEFAULT_LIST_INDENT_WIDTH,
        metadata={"help": "Spaces per list nesting level", "type": int, "importance": "core"},
    )
    bullet_marker: str = field(
        default=DEFAULT_BULLET_MARKER,
        metadata={"help": "Marker for bullet list items", "choices": ["-", "*", "+"], "importance": "advanced"},
    )
    media_placeholder: str = field(
        default=DEFAULT_MEDIA_PLACEHOLDER_MARKDOWN,
        metadata={"help": "Text emitted in place of media attachments", "importance": "advanced"},
    )
    escape_table_pipes: bool = field(
        default=True,
        metadata={"help": "Escape '|' characters inside table cells", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate indentation and marker choices.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        super().__post_init__()
        if self.list_indent_width < 1:
            raise ValueError(f"list_indent_width must be at least 1, got {self.list_indent_width}")
        if self.bullet_marker not in ("-", "*", "+"):
            raise ValueError(f"bullet_marker must be one of '-', '*', '+', got {self.bullet_marker!r}")
