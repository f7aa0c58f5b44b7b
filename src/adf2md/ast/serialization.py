#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adf2md/ast/serialization.py
"""Wire-format serialization for ADF trees.

ADF travels as JSON objects of the shape::

    {"type": "paragraph", "attrs": {...}, "content": [...], "text": "...", "marks": [...]}

and a top-level document is ``{"type": "doc", "attrs": {"version": 1}, "content": [...]}``.

Decoding is lenient below the root: unknown kinds become
:class:`~adf2md.ast.nodes.UnknownNode` / :class:`~adf2md.ast.marks.UnknownMark`
and children that are not objects are skipped. Only a root that is not an
object with a string ``type`` is rejected.

Examples
--------
    >>> from adf2md.ast.serialization import dict_to_adf, adf_to_dict
    >>> node = dict_to_adf({"type": "text", "text": "hi", "marks": [{"type": "strong"}]})
    >>> node.marks
    [Strong()]
    >>> adf_to_dict(node)
    {'type': 'text', 'text': 'hi', 'marks': [{'type': 'strong'}]}

"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Mapping

from adf2md.ast.marks import (
    MARK_CLASSES,
    BackgroundColor,
    Link,
    Mark,
    SubSup,
    TextColor,
    UnknownMark,
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
)
from adf2md.constants import ADF_VERSION
from adf2md.exceptions import MalformedDocumentError, ParsingError

logger = logging.getLogger(__name__)


# ============================================================================
# Helpers
# ============================================================================


def _attrs_of(data: Mapping[str, Any]) -> dict[str, Any]:
    attrs = data.get("attrs")
    return dict(attrs) if isinstance(attrs, Mapping) else {}


def _optional_str(value: Any) -> str | None:
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


def _optional_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value)
    return None


def _compact(attrs: dict[str, Any]) -> dict[str, Any]:
    """Drop attributes whose value is None."""
    return {key: value for key, value in attrs.items() if value is not None}


# ============================================================================
# Marks
# ============================================================================


def dict_to_mark(data: Mapping[str, Any]) -> Mark:
    """Decode one mark object.

    Parameters
    ----------
    data : Mapping
        Mark object with ``type`` and optional ``attrs``

    Returns
    -------
    Mark
        The decoded mark; unrecognized kinds become UnknownMark

    """
    mark_type = data.get("type")
    attrs = _attrs_of(data)
    if mark_type == "link":
        return Link(href=_optional_str(attrs.get("href")) or "", title=_optional_str(attrs.get("title")))
    if mark_type == "subsup":
        return SubSup(type="sup" if attrs.get("type") == "sup" else "sub")
    if mark_type == "textColor":
        return TextColor(color=_optional_str(attrs.get("color")) or "")
    if mark_type == "backgroundColor":
        return BackgroundColor(color=_optional_str(attrs.get("color")) or "")

    mark_class = MARK_CLASSES.get(mark_type) if isinstance(mark_type, str) else None
    if mark_class is not None:
        return mark_class()

    logger.debug("Unknown mark type %r kept as UnknownMark", mark_type)
    return UnknownMark(type=str(mark_type or ""), attrs=attrs)


def mark_to_dict(mark: Mark) -> dict[str, Any]:
    """Encode one mark object."""
    attrs: dict[str, Any] = {}
    if isinstance(mark, Link):
        attrs = _compact({"href": mark.href, "title": mark.title})
    elif isinstance(mark, SubSup):
        attrs = {"type": mark.type}
    elif isinstance(mark, (TextColor, BackgroundColor)):
        attrs = {"color": mark.color}
    elif isinstance(mark, UnknownMark):
        attrs = dict(mark.attrs)

    result: dict[str, Any] = {"type": mark.kind}
    if attrs:
        result["attrs"] = attrs
    return result


def _decode_marks(data: Mapping[str, Any]) -> list[Mark]:
    marks = data.get("marks")
    if not isinstance(marks, list):
        return []
    return [dict_to_mark(mark) for mark in marks if isinstance(mark, Mapping)]


# ============================================================================
# Deserialization
# ============================================================================


def _decode_children(data: Mapping[str, Any]) -> list[Node]:
    children = data.get("content")
    if not isinstance(children, list):
        return []

    nodes: list[Node] = []
    for child in children:
        if not isinstance(child, Mapping):
            logger.debug("Skipping non-object child of type %s", type(child).__name__)
            continue
        nodes.append(dict_to_adf(child))
    return nodes


def _deserialize_doc(data: Mapping[str, Any], attrs: dict[str, Any]) -> Doc:
    version = _optional_int(attrs.get("version"))
    return Doc(content=_decode_children(data), version=version if version is not None else ADF_VERSION)


def _deserialize_heading(data: Mapping[str, Any], attrs: dict[str, Any]) -> Heading:
    return Heading(level=_optional_int(attrs.get("level")), content=_decode_children(data))


def _deserialize_ordered_list(data: Mapping[str, Any], attrs: dict[str, Any]) -> OrderedList:
    return OrderedList(content=_decode_children(data), order=_optional_int(attrs.get("order")))


def _deserialize_code_block(data: Mapping[str, Any], attrs: dict[str, Any]) -> CodeBlock:
    # Code never carries marks
    code = [
        Text(text=child.text) if isinstance(child, Text) else child
        for child in _decode_children(data)
    ]
    return CodeBlock(language=_optional_str(attrs.get("language")) or None, content=code)


def _deserialize_cell(cls: type[TableCell]) -> Callable[[Mapping[str, Any], dict[str, Any]], TableCell]:
    def deserialize(data: Mapping[str, Any], attrs: dict[str, Any]) -> TableCell:
        return cls(
            content=_decode_children(data),
            colspan=_optional_int(attrs.get("colspan")),
            rowspan=_optional_int(attrs.get("rowspan")),
        )

    return deserialize


def _deserialize_expand(cls: type[Expand]) -> Callable[[Mapping[str, Any], dict[str, Any]], Expand]:
    def deserialize(data: Mapping[str, Any], attrs: dict[str, Any]) -> Expand:
        return cls(title=_optional_str(attrs.get("title")), content=_decode_children(data))

    return deserialize


def _deserialize_text(data: Mapping[str, Any], attrs: dict[str, Any]) -> Text:
    return Text(text=_optional_str(data.get("text")) or "", marks=_decode_marks(data))


_DESERIALIZATION_DISPATCH: dict[str, Callable[[Mapping[str, Any], dict[str, Any]], Node]] = {
    "doc": _deserialize_doc,
    "paragraph": lambda d, a: Paragraph(content=_decode_children(d)),
    "heading": _deserialize_heading,
    "blockquote": lambda d, a: Blockquote(content=_decode_children(d)),
    "bulletList": lambda d, a: BulletList(content=_decode_children(d)),
    "orderedList": _deserialize_ordered_list,
    "listItem": lambda d, a: ListItem(content=_decode_children(d)),
    "codeBlock": _deserialize_code_block,
    "rule": lambda d, a: Rule(),
    "table": lambda d, a: Table(content=_decode_children(d)),
    "tableRow": lambda d, a: TableRow(content=_decode_children(d)),
    "tableHeader": _deserialize_cell(TableHeader),
    "tableCell": _deserialize_cell(TableCell),
    "panel": lambda d, a: Panel(panel_type=_optional_str(a.get("panelType")), content=_decode_children(d)),
    "expand": _deserialize_expand(Expand),
    "nestedExpand": _deserialize_expand(NestedExpand),
    "mediaSingle": lambda d, a: MediaSingle(content=_decode_children(d), layout=_optional_str(a.get("layout"))),
    "media": lambda d, a: Media(
        id=_optional_str(a.get("id")),
        media_type=_optional_str(a.get("type")),
        collection=_optional_str(a.get("collection")),
        alt=_optional_str(a.get("alt")),
    ),
    "hardBreak": lambda d, a: HardBreak(),
    "mention": lambda d, a: Mention(id=_optional_str(a.get("id")), text=_optional_str(a.get("text"))),
    "emoji": lambda d, a: Emoji(
        short_name=_optional_str(a.get("shortName")),
        id=_optional_str(a.get("id")),
        text=_optional_str(a.get("text")),
    ),
    "inlineCard": lambda d, a: InlineCard(url=_optional_str(a.get("url"))),
    "text": _deserialize_text,
}


def dict_to_adf(data: Mapping[str, Any]) -> Node:
    """Convert a wire-format object to an ADF node.

    Parameters
    ----------
    data : Mapping
        Node object with a ``type`` discriminator

    Returns
    -------
    Node
        Decoded node. Unknown kinds become UnknownNode.

    Raises
    ------
    MalformedDocumentError
        If ``data`` is not a mapping with a string ``type``

    """
    if not isinstance(data, Mapping):
        raise MalformedDocumentError(f"Expected an ADF node object, got {type(data).__name__}", received=data)

    node_type = data.get("type")
    if not isinstance(node_type, str) or not node_type:
        raise MalformedDocumentError("ADF node object is missing its 'type' field", received=node_type)

    attrs = _attrs_of(data)
    deserializer = _DESERIALIZATION_DISPATCH.get(node_type)
    if deserializer is not None:
        return deserializer(data, attrs)

    logger.debug("Unknown node type %r kept as UnknownNode", node_type)
    return UnknownNode(
        type=node_type,
        attrs=attrs,
        content=_decode_children(data),
        text=_optional_str(data.get("text")),
        marks=_decode_marks(data),
    )


# ============================================================================
# Serialization
# ============================================================================


def _node_attrs(node: Node) -> dict[str, Any]:
    if isinstance(node, Doc):
        return {"version": node.version}
    if isinstance(node, Heading):
        return _compact({"level": node.level})
    if isinstance(node, OrderedList):
        return _compact({"order": node.order})
    if isinstance(node, CodeBlock):
        return _compact({"language": node.language})
    if isinstance(node, TableCell):
        return _compact({"colspan": node.colspan, "rowspan": node.rowspan})
    if isinstance(node, Panel):
        return _compact({"panelType": node.panel_type})
    if isinstance(node, Expand):
        return _compact({"title": node.title})
    if isinstance(node, MediaSingle):
        return _compact({"layout": node.layout})
    if isinstance(node, Media):
        return _compact({"id": node.id, "type": node.media_type, "collection": node.collection, "alt": node.alt})
    if isinstance(node, Mention):
        return _compact({"id": node.id, "text": node.text})
    if isinstance(node, Emoji):
        return _compact({"shortName": node.short_name, "id": node.id, "text": node.text})
    if isinstance(node, InlineCard):
        return _compact({"url": node.url})
    if isinstance(node, UnknownNode):
        return dict(node.attrs)
    return {}


def adf_to_dict(node: Node) -> dict[str, Any]:
    """Convert an ADF node to its wire-format object.

    Parameters
    ----------
    node : Node
        The node to convert

    Returns
    -------
    dict
        JSON-compatible object. Container kinds always carry ``content``;
        empty ``attrs`` and ``marks`` are omitted.

    """
    result: dict[str, Any] = {"type": node.kind}

    attrs = _node_attrs(node)
    if attrs:
        result["attrs"] = attrs

    if isinstance(node, Text):
        result["text"] = node.text
        if node.marks:
            result["marks"] = [mark_to_dict(mark) for mark in node.marks]
        return result

    if isinstance(node, UnknownNode):
        if node.content:
            result["content"] = [adf_to_dict(child) for child in node.content]
        if node.text is not None:
            result["text"] = node.text
        if node.marks:
            result["marks"] = [mark_to_dict(mark) for mark in node.marks]
        return result

    content = getattr(node, "content", None)
    if isinstance(content, list):
        result["content"] = [adf_to_dict(child) for child in content]
    return result


def adf_to_json(node: Node, indent: int | None = None) -> str:
    """Serialize an ADF node to a JSON string.

    Parameters
    ----------
    node : Node
        The node to serialize
    indent : int or None, default = None
        Number of spaces for indentation (None for compact format)

    Returns
    -------
    str
        JSON text; non-ASCII characters are kept as-is

    """
    return json.dumps(adf_to_dict(node), indent=indent, ensure_ascii=False)


def json_to_adf(json_str: str | bytes) -> Node:
    """Deserialize a JSON string to an ADF node.

    Parameters
    ----------
    json_str : str or bytes
        JSON text of a node object

    Returns
    -------
    Node
        The decoded node

    Raises
    ------
    ParsingError
        If the text is not valid JSON
    MalformedDocumentError
        If the decoded value is not a node object

    """
    try:
        data = json.loads(json_str)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ParsingError(f"Invalid ADF JSON: {e}", parsing_stage="json_decode", original_error=e) from e
    return dict_to_adf(data)


__all__ = [
    "dict_to_adf",
    "adf_to_dict",
    "dict_to_mark",
    "mark_to_dict",
    "adf_to_json",
    "json_to_adf",
]
