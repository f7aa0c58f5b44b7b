#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adf2md/ast/nodes.py
"""ADF node classes for document representation.

This module defines the node vocabulary of the ADF document tree. There is
one dataclass per node kind, each carrying only the attributes that kind
needs, and every node supports the visitor pattern through ``accept()``.

Node Hierarchy
--------------
Container nodes own an ordered ``content`` list:
    - Doc, Paragraph, Blockquote, BulletList, OrderedList, ListItem
    - Table, TableRow, TableHeader, TableCell
    - Panel, Expand (and NestedExpand), MediaSingle

Leaf nodes with attributes:
    - Heading (content is inline), CodeBlock (content is unmarked text)
    - Mention, Emoji, InlineCard, Media, Rule, HardBreak

Text nodes carry a string payload and an ordered list of marks
(see :mod:`adf2md.ast.marks`).

Anything else decodes to :class:`UnknownNode`, which keeps the raw kind so
renderers can fall back to rendering its children.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, ClassVar, Optional

from adf2md.ast.marks import Mark


class Node(ABC):
    """Base class for all ADF nodes.

    Subclasses define ``type_name``, the wire-format ``type`` discriminator.
    """

    type_name: ClassVar[str] = ""

    @property
    def kind(self) -> str:
        """Return the wire-format ``type`` discriminator of this node."""
        return self.type_name

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass
class Doc(Node):
    """Root document node.

    Parameters
    ----------
    content : list of Node, default = empty list
        Top-level block nodes
    version : int, default = 1
        ADF format version

    """

    type_name: ClassVar[str] = "doc"

    content: list[Node] = field(default_factory=list)
    version: int = 1

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this document."""
        return visitor.visit_doc(self)


@dataclass
class Paragraph(Node):
    """Paragraph of inline content."""

    type_name: ClassVar[str] = "paragraph"

    content: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this paragraph."""
        return visitor.visit_paragraph(self)


@dataclass
class Heading(Node):
    """Heading node.

    Parameters
    ----------
    level : int or None, default = None
        Heading level 1-6; None when the attribute was absent
    content : list of Node
        Inline content

    """

    type_name: ClassVar[str] = "heading"

    level: Optional[int] = None
    content: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this heading."""
        return visitor.visit_heading(self)


@dataclass
class Blockquote(Node):
    """Quoted block content."""

    type_name: ClassVar[str] = "blockquote"

    content: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this block quote."""
        return visitor.visit_blockquote(self)


@dataclass
class BulletList(Node):
    """Unordered list of ListItem nodes."""

    type_name: ClassVar[str] = "bulletList"

    content: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this list."""
        return visitor.visit_bullet_list(self)


@dataclass
class OrderedList(Node):
    """Ordered list of ListItem nodes.

    Parameters
    ----------
    content : list of Node
        List items
    order : int or None, default = None
        Number of the first item; None means 1

    """

    type_name: ClassVar[str] = "orderedList"

    content: list[Node] = field(default_factory=list)
    order: Optional[int] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this list."""
        return visitor.visit_ordered_list(self)


@dataclass
class ListItem(Node):
    """List item; its children are block-level nodes."""

    type_name: ClassVar[str] = "listItem"

    content: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this list item."""
        return visitor.visit_list_item(self)


@dataclass
class CodeBlock(Node):
    """Fenced code block.

    Parameters
    ----------
    language : str or None, default = None
        Language hint for syntax highlighting
    content : list of Node
        Zero or one Text node without marks

    """

    type_name: ClassVar[str] = "codeBlock"

    language: Optional[str] = None
    content: list[Node] = field(default_factory=list)

    @property
    def code(self) -> str:
        """Return the raw code text."""
        return "".join(child.text for child in self.content if isinstance(child, Text))

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this code block."""
        return visitor.visit_code_block(self)


@dataclass
class Rule(Node):
    """Horizontal rule."""

    type_name: ClassVar[str] = "rule"

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this rule."""
        return visitor.visit_rule(self)


@dataclass
class Table(Node):
    """Table made of TableRow nodes. Rows need not have equal cell counts."""

    type_name: ClassVar[str] = "table"

    content: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this table."""
        return visitor.visit_table(self)


@dataclass
class TableRow(Node):
    """Row of TableHeader and/or TableCell nodes."""

    type_name: ClassVar[str] = "tableRow"

    content: list[Node] = field(default_factory=list)

    @property
    def has_header_cell(self) -> bool:
        """Return True if any cell in this row is a TableHeader."""
        return any(isinstance(cell, TableHeader) for cell in self.content)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this row."""
        return visitor.visit_table_row(self)


@dataclass
class TableCell(Node):
    """Body cell holding block content.

    Parameters
    ----------
    content : list of Node
        Block content of the cell
    colspan : int or None, default = None
        Number of columns spanned
    rowspan : int or None, default = None
        Number of rows spanned

    """

    type_name: ClassVar[str] = "tableCell"

    content: list[Node] = field(default_factory=list)
    colspan: Optional[int] = None
    rowspan: Optional[int] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this cell."""
        return visitor.visit_table_cell(self)


@dataclass
class TableHeader(TableCell):
    """Header cell; same shape as TableCell."""

    type_name: ClassVar[str] = "tableHeader"

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this header cell."""
        return visitor.visit_table_header(self)


@dataclass
class Panel(Node):
    """Callout panel.

    Parameters
    ----------
    panel_type : str or None, default = None
        Panel style such as ``info`` or ``warning``; None means ``info``
    content : list of Node
        Block content

    """

    type_name: ClassVar[str] = "panel"

    panel_type: Optional[str] = None
    content: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this panel."""
        return visitor.visit_panel(self)


@dataclass
class Expand(Node):
    """Collapsible region with a title."""

    type_name: ClassVar[str] = "expand"

    title: Optional[str] = None
    content: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this expand."""
        return visitor.visit_expand(self)


@dataclass
class NestedExpand(Expand):
    """Expand placed inside a table cell; rendered exactly like Expand."""

    type_name: ClassVar[str] = "nestedExpand"


@dataclass
class MediaSingle(Node):
    """Block wrapper around a single Media node."""

    type_name: ClassVar[str] = "mediaSingle"

    content: list[Node] = field(default_factory=list)
    layout: Optional[str] = None

    @property
    def media(self) -> Optional[Media]:
        """Return the first Media child, if any."""
        return next((child for child in self.content if isinstance(child, Media)), None)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this media wrapper."""
        return visitor.visit_media_single(self)


# ============================================================================
# Inline and leaf Nodes
# ============================================================================


@dataclass
class Media(Node):
    """Reference to an attachment.

    Parameters
    ----------
    id : str or None
        Media id, resolved through the renderer's media map
    media_type : str or None
        ``file``, ``link`` or ``external``
    collection : str or None
        Media collection name
    alt : str or None
        Alternative text

    """

    type_name: ClassVar[str] = "media"

    id: Optional[str] = None
    media_type: Optional[str] = None
    collection: Optional[str] = None
    alt: Optional[str] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this media node."""
        return visitor.visit_media(self)


@dataclass
class HardBreak(Node):
    """Explicit line break."""

    type_name: ClassVar[str] = "hardBreak"

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this line break."""
        return visitor.visit_hard_break(self)


@dataclass
class Mention(Node):
    """User mention; ``text`` is the display name."""

    type_name: ClassVar[str] = "mention"

    id: Optional[str] = None
    text: Optional[str] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this mention."""
        return visitor.visit_mention(self)


@dataclass
class Emoji(Node):
    """Emoji identified by its short name (``:smile:``)."""

    type_name: ClassVar[str] = "emoji"

    short_name: Optional[str] = None
    id: Optional[str] = None
    text: Optional[str] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this emoji."""
        return visitor.visit_emoji(self)


@dataclass
class InlineCard(Node):
    """Smart link rendered as a card."""

    type_name: ClassVar[str] = "inlineCard"

    url: Optional[str] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this inline card."""
        return visitor.visit_inline_card(self)


@dataclass
class Text(Node):
    """Run of text with stacked marks.

    Parameters
    ----------
    text : str
        Text payload
    marks : list of Mark, default = empty list
        Marks in application order

    """

    type_name: ClassVar[str] = "text"

    text: str = ""
    marks: list[Mark] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this text."""
        return visitor.visit_text(self)


@dataclass
class UnknownNode(Node):
    """Node of a kind this library does not model.

    The raw discriminator and payload are kept so the tree can be
    re-serialized and renderers can fall back to the children.
    """

    type: str = ""
    attrs: dict[str, Any] = field(default_factory=dict)
    content: list[Node] = field(default_factory=list)
    text: Optional[str] = None
    marks: list[Mark] = field(default_factory=list)

    @property
    def kind(self) -> str:
        """Return the raw ``type`` the node was decoded from."""
        return self.type

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this unknown node."""
        return visitor.visit_unknown(self)


CONTAINER_TYPES: tuple[type[Node], ...] = (
    Doc,
    Paragraph,
    Heading,
    Blockquote,
    BulletList,
    OrderedList,
    ListItem,
    CodeBlock,
    Table,
    TableRow,
    TableCell,
    Panel,
    Expand,
    MediaSingle,
)


def get_node_children(node: Node) -> list[Node]:
    """Return the ordered children of ``node`` (empty for leaf nodes).

    Parameters
    ----------
    node : Node
        Any ADF node

    Returns
    -------
    list of Node
        The node's ``content`` list, or an empty list

    """
    if isinstance(node, (*CONTAINER_TYPES, UnknownNode)):
        return node.content  # type: ignore[attr-defined]
    return []


__all__ = [
    "Node",
    "Doc",
    "Paragraph",
    "Heading",
    "Blockquote",
    "BulletList",
    "OrderedList",
    "ListItem",
    "CodeBlock",
    "Rule",
    "Table",
    "TableRow",
    "TableCell",
    "TableHeader",
    "Panel",
    "Expand",
    "NestedExpand",
    "MediaSingle",
    "Media",
    "HardBreak",
    "Mention",
    "Emoji",
    "InlineCard",
    "Text",
    "UnknownNode",
    "CONTAINER_TYPES",
    "get_node_children",
]
