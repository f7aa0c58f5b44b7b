#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adf2md/ast/__init__.py
"""ADF document tree model.

The tree is the shared vocabulary of every converter in adf2md:

- nodes: one dataclass per node kind
- marks: one dataclass per inline mark kind, plus the ``apply_marks`` fold
- visitors: the ``NodeVisitor`` base class renderers implement
- serialization: the JSON wire format

Examples
--------
    >>> from adf2md.ast import Doc, Paragraph, Strong, Text
    >>> doc = Doc(content=[Paragraph(content=[Text(text="Hi", marks=[Strong()])])])

"""

from __future__ import annotations

from adf2md.ast.marks import (
    MARK_CLASSES,
    BackgroundColor,
    Code,
    Em,
    Link,
    Mark,
    Strike,
    Strong,
    SubSup,
    TextColor,
    Underline,
    UnknownMark,
    apply_marks,
    has_mark,
)
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
    NestedExpand,
    Node,
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
    get_node_children,
)
from adf2md.ast.serialization import adf_to_dict, adf_to_json, dict_to_adf, json_to_adf
from adf2md.ast.visitors import NodeVisitor

__all__ = [
    # Nodes
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
    "get_node_children",
    # Marks
    "Mark",
    "Strong",
    "Em",
    "Strike",
    "Code",
    "Underline",
    "Link",
    "SubSup",
    "TextColor",
    "BackgroundColor",
    "UnknownMark",
    "MARK_CLASSES",
    "apply_marks",
    "has_mark",
    # Visitors
    "NodeVisitor",
    # Serialization
    "adf_to_dict",
    "adf_to_json",
    "dict_to_adf",
    "json_to_adf",
]
