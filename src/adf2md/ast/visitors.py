#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adf2md/ast/visitors.py
"""Visitor pattern implementation for ADF tree traversal.

Renderers subclass :class:`NodeVisitor` and implement one ``visit_*`` method
per node kind, so every kind in :mod:`adf2md.ast.nodes` has to be handled
explicitly. Unknown kinds arrive at ``visit_unknown``.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from adf2md.ast.nodes import (
    Blockquote,
    BulletList,
    CodeBlock,
    Doc,
    Emoji,
    Expand,
    HardBreak,
    Heading,
    InlineCard,
    ListItem,
    Media,
    MediaSingle,
    Mention,
    OrderedList,
    Panel,
    Paragraph,
    Rule,
    Table,
    TableCell,
    TableHeader,
    TableRow,
    Text,
    UnknownNode,
)


class NodeVisitor(ABC):
    """Abstract base class for ADF node visitors.

    All visit methods accept a node and return Any (typically None for
    visitors that accumulate output, or a value for transforming visitors).

    Examples
    --------
    Collecting the plain text of a paragraph:

        >>> class PlainText(NodeVisitor):
        ...     def visit_paragraph(self, node):
        ...         return "".join(child.accept(self) for child in node.content)
        ...
        ...     def visit_text(self, node):
        ...         return node.text
        ...
        ...     # ... remaining visit_* methods

    """

    @abstractmethod
    def visit_doc(self, node: Doc) -> Any:
        """Visit the document root."""

    @abstractmethod
    def visit_paragraph(self, node: Paragraph) -> Any:
        """Visit a Paragraph node."""

    @abstractmethod
    def visit_heading(self, node: Heading) -> Any:
        """Visit a Heading node."""

    @abstractmethod
    def visit_blockquote(self, node: Blockquote) -> Any:
        """Visit a Blockquote node."""

    @abstractmethod
    def visit_bullet_list(self, node: BulletList) -> Any:
        """Visit a BulletList node."""

    @abstractmethod
    def visit_ordered_list(self, node: OrderedList) -> Any:
        """Visit an OrderedList node."""

    @abstractmethod
    def visit_list_item(self, node: ListItem) -> Any:
        """Visit a ListItem node."""

    @abstractmethod
    def visit_code_block(self, node: CodeBlock) -> Any:
        """Visit a CodeBlock node."""

    @abstractmethod
    def visit_rule(self, node: Rule) -> Any:
        """Visit a Rule node."""

    @abstractmethod
    def visit_table(self, node: Table) -> Any:
        """Visit a Table node."""

    @abstractmethod
    def visit_table_row(self, node: TableRow) -> Any:
        """Visit a TableRow node."""

    @abstractmethod
    def visit_table_header(self, node: TableHeader) -> Any:
        """Visit a TableHeader cell."""

    @abstractmethod
    def visit_table_cell(self, node: TableCell) -> Any:
        """Visit a TableCell node."""

    @abstractmethod
    def visit_panel(self, node: Panel) -> Any:
        """Visit a Panel node."""

    @abstractmethod
    def visit_expand(self, node: Expand) -> Any:
        """Visit an Expand or NestedExpand node."""

    @abstractmethod
    def visit_media_single(self, node: MediaSingle) -> Any:
        """Visit a MediaSingle node."""

    @abstractmethod
    def visit_media(self, node: Media) -> Any:
        """Visit a Media node."""

    @abstractmethod
    def visit_hard_break(self, node: HardBreak) -> Any:
        """Visit a HardBreak node."""

    @abstractmethod
    def visit_mention(self, node: Mention) -> Any:
        """Visit a Mention node."""

    @abstractmethod
    def visit_emoji(self, node: Emoji) -> Any:
        """Visit an Emoji node."""

    @abstractmethod
    def visit_inline_card(self, node: InlineCard) -> Any:
        """Visit an InlineCard node."""

    @abstractmethod
    def visit_text(self, node: Text) -> Any:
        """Visit a Text node."""

    @abstractmethod
    def visit_unknown(self, node: UnknownNode) -> Any:
        """Visit a node of an unrecognized kind."""
