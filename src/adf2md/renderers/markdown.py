#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adf2md/renderers/markdown.py
"""Markdown rendering from ADF trees.

This module provides the MarkdownRenderer class which converts ADF nodes
to Markdown text. Every node kind has a rendering; nodes and marks without
a Markdown equivalent fall back to their children or to plain text, so
rendering never fails on a well-formed root.

The renderer uses the visitor pattern. Each block is rendered into its own
string (see ``_render_block``) and joined by its parent, with the current
list nesting depth threaded through as renderer state.

"""

from __future__ import annotations

import logging
from typing import Callable, Mapping, Union

from adf2md.ast import (
    BackgroundColor,
    Blockquote,
    BulletList,
    Code,
    CodeBlock,
    Doc,
    Em,
    Emoji,
    Expand,
    HardBreak,
    Heading,
    InlineCard,
    Link,
    ListItem,
    Mark,
    Media,
    MediaSingle,
    Mention,
    Node,
    OrderedList,
    Panel,
    Paragraph,
    Rule,
    Strike,
    Strong,
    SubSup,
    Table,
    TableCell,
    TableHeader,
    TableRow,
    Text,
    TextColor,
    Underline,
    UnknownNode,
    apply_marks,
)
from adf2md.ast.visitors import NodeVisitor
from adf2md.constants import DEFAULT_EXPAND_TITLE, DEFAULT_HEADING_LEVEL, DEFAULT_MENTION_TEXT, DEFAULT_PANEL_TYPE
from adf2md.options.markdown import MarkdownRendererOptions
from adf2md.renderers.base import BaseRenderer, DocumentInput, InlineContentMixin
from adf2md.utils.decorators import debug_timer

logger = logging.getLogger(__name__)


class MarkdownRenderer(NodeVisitor, InlineContentMixin, BaseRenderer):
    """Render ADF nodes to Markdown text.

    Parameters
    ----------
    options : MarkdownRendererOptions or None, default = None
        Markdown formatting options

    Examples
    --------
    Basic usage:

        >>> from adf2md.ast import Doc, Heading, Text
        >>> from adf2md.renderers.markdown import MarkdownRenderer
        >>> doc = Doc(content=[Heading(level=1, content=[Text(text="Title")])])
        >>> print(MarkdownRenderer().render_to_string(doc))
        # Title

    """

    def __init__(self, options: MarkdownRendererOptions | None = None):
        """Initialize the Markdown renderer with options."""
        BaseRenderer._validate_options_type(options, MarkdownRendererOptions, "markdown")
        options = options or MarkdownRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: MarkdownRendererOptions = options
        self._output: list[str] = []
        self._list_depth: int = 0

    def render_to_string(self, doc: DocumentInput) -> str:
        """Render a document to a Markdown string.

        Parameters
        ----------
        doc : Doc or Mapping
            The document to render, as nodes or in wire format

        Returns
        -------
        str
            Markdown text

        Raises
        ------
        MalformedDocumentError
            If the root is not a ``doc`` node

        """
        document = self._coerce_document(doc)
        self._output = []
        self._list_depth = 0

        with debug_timer(logger, "Rendering (markdown)"):
            document.accept(self)

        result = "".join(self._output)
        self._output = []
        return result

    def _render_block(self, node: Node, depth: int = 0) -> str:
        """Render a single node to a string at the given list depth."""
        saved_depth = self._list_depth
        self._list_depth = depth
        try:
            return self._render_inline_content([node])
        finally:
            self._list_depth = saved_depth

    def _render_blocks(self, nodes: list[Node], separator: str, depth: int = 0) -> str:
        return separator.join(self._render_block(child, depth) for child in nodes)

    def _wrap_mark(self, text: str, mark: Mark) -> str:
        """Wrap ``text`` in the Markdown syntax for ``mark``.

        Colours have no Markdown equivalent and, like unknown marks, leave
        the text unchanged.

        """
        if isinstance(mark, Strong):
            return f"**{text}**"
        elif isinstance(mark, Em):
            return f"*{text}*"
        elif isinstance(mark, Strike):
            return f"~~{text}~~"
        elif isinstance(mark, Code):
            return f"`{text}`"
        elif isinstance(mark, Link):
            return f"[{text}]({mark.href})"
        elif isinstance(mark, Underline):
            return f"<u>{text}</u>"
        elif isinstance(mark, SubSup):
            tag = "sup" if mark.type == "sup" else "sub"
            return f"<{tag}>{text}</{tag}>"
        elif isinstance(mark, (TextColor, BackgroundColor)):
            return text
        logger.debug("Ignoring unsupported mark %r", mark.kind)
        return text

    # ------------------------------------------------------------------
    # Block nodes
    # ------------------------------------------------------------------

    def visit_doc(self, node: Doc) -> None:
        """Render the document, separating top-level blocks with blank lines."""
        self._output.append(self._render_blocks(node.content, "\n\n"))

    def visit_paragraph(self, node: Paragraph) -> None:
        """Render a Paragraph node."""
        self._output.append(self._render_inline_content(node.content))

    def visit_heading(self, node: Heading) -> None:
        """Render a Heading node as an ATX heading."""
        level = node.level or DEFAULT_HEADING_LEVEL
        level = max(1, min(level, 6))
        self._output.append(f"{'#' * level} {self._render_inline_content(node.content)}")

    def visit_blockquote(self, node: Blockquote) -> None:
        """Render a Blockquote node, quoting every line."""
        content = self._render_blocks(node.content, "\n")
        self._output.append("\n".join(f"> {line}" for line in content.split("\n")))

    def visit_bullet_list(self, node: BulletList) -> None:
        """Render a BulletList node."""
        marker = self.options.bullet_marker
        self._render_list(node.content, lambda index: marker)

    def visit_ordered_list(self, node: OrderedList) -> None:
        """Render an OrderedList node, numbering from its ``order`` attribute."""
        start = node.order if node.order is not None else 1
        self._render_list(node.content, lambda index: f"{start + index}.")

    def _render_list(self, items: list[Node], marker_for: Callable[[int], str]) -> None:
        """Render list items one per line, indented for the current depth.

        Item content is rendered one level deeper, so nested lists pick up
        the extra indent while the item's own paragraphs do not.

        """
        depth = self._list_depth
        indent = " " * (self.options.list_indent_width * depth)
        lines = []
        for index, item in enumerate(items):
            content = self._render_block(item, depth + 1)
            lines.append(f"{indent}{marker_for(index)} {content}")
        self._output.append("\n".join(lines))

    def visit_list_item(self, node: ListItem) -> None:
        """Render a ListItem node's blocks, one per line."""
        self._output.append(self._render_blocks(node.content, "\n", self._list_depth))

    def visit_code_block(self, node: CodeBlock) -> None:
        """Render a CodeBlock node as a fenced code block."""
        self._output.append(f"```{node.language or ''}\n{node.code}\n```")

    def visit_rule(self, node: Rule) -> None:
        """Render a Rule node."""
        self._output.append("---")

    def visit_table(self, node: Table) -> None:
        """Render a Table node as a pipe table.

        Short rows are padded with empty cells. A separator row follows the
        first row only when that row holds a header cell.

        """
        rows = [row for row in node.content if isinstance(row, TableRow)]
        if not rows:
            return

        col_count = self._compute_table_columns(rows)
        lines = []
        for index, row in enumerate(rows):
            cells = [self._render_cell(cell) for cell in row.content]
            cells.extend([""] * (col_count - len(cells)))
            lines.append(f"| {' | '.join(cells)} |")
            if index == 0 and row.has_header_cell:
                lines.append(f"| {' | '.join(['---'] * col_count)} |")
        self._output.append("\n".join(lines))

    def _render_cell(self, cell: Node) -> str:
        if isinstance(cell, (TableCell, UnknownNode)):
            content = self._render_blocks(cell.content, " ")
        else:
            content = self._render_block(cell)
        # A pipe row must stay on one physical line
        content = " ".join(line.strip() for line in content.split("\n") if line.strip())
        if self.options.escape_table_pipes:
            content = content.replace("|", "\\|")
        return content

    def visit_table_row(self, node: TableRow) -> None:
        """Render a TableRow outside a table as a single pipe row."""
        cells = [self._render_cell(cell) for cell in node.content]
        self._output.append(f"| {' | '.join(cells)} |")

    def visit_table_header(self, node: TableHeader) -> None:
        """Render a TableHeader outside a table as its content."""
        self._output.append(self._render_blocks(node.content, " "))

    def visit_table_cell(self, node: TableCell) -> None:
        """Render a TableCell outside a table as its content."""
        self._output.append(self._render_blocks(node.content, " "))

    def visit_panel(self, node: Panel) -> None:
        """Render a Panel node as a quoted callout with a bold type label."""
        label = (node.panel_type or DEFAULT_PANEL_TYPE).upper()
        lines = self._render_blocks(node.content, "\n").split("\n")
        quoted = [f"> **{label}:** {lines[0]}"]
        quoted.extend(f"> {line}" for line in lines[1:])
        self._output.append("\n".join(quoted))

    def visit_expand(self, node: Expand) -> None:
        """Render an Expand or NestedExpand node as a details element."""
        title = node.title or DEFAULT_EXPAND_TITLE
        content = self._render_blocks(node.content, "\n")
        self._output.append(f"<details>\n<summary>{title}</summary>\n\n{content}\n</details>")

    def visit_media_single(self, node: MediaSingle) -> None:
        """Render a MediaSingle node as the media placeholder."""
        self._output.append(self.options.media_placeholder)

    def visit_media(self, node: Media) -> None:
        """Render a Media node as the media placeholder."""
        self._output.append(self.options.media_placeholder)

    # ------------------------------------------------------------------
    # Inline nodes
    # ------------------------------------------------------------------

    def visit_hard_break(self, node: HardBreak) -> None:
        """Render a HardBreak node."""
        self._output.append("\n")

    def visit_mention(self, node: Mention) -> None:
        """Render a Mention node as its display text."""
        self._output.append(node.text or DEFAULT_MENTION_TEXT)

    def visit_emoji(self, node: Emoji) -> None:
        """Render an Emoji node as its short name."""
        self._output.append(node.short_name or "")

    def visit_inline_card(self, node: InlineCard) -> None:
        """Render an InlineCard node as a link to itself."""
        url = node.url or ""
        self._output.append(f"[{url}]({url})")

    def visit_text(self, node: Text) -> None:
        """Render a Text node with its marks applied in order."""
        self._output.append(apply_marks(node.text, node.marks, self._wrap_mark))

    def visit_unknown(self, node: UnknownNode) -> None:
        """Render an unknown node as its text, or else its children."""
        if node.text is not None:
            self._output.append(apply_marks(node.text, node.marks, self._wrap_mark))
            return
        logger.debug("Rendering children of unknown node %r", node.kind)
        self._output.append(self._render_blocks(node.content, "", self._list_depth))


def adf_to_markdown(tree: Union[Doc, Mapping], options: MarkdownRendererOptions | None = None) -> str:
    """Convert an ADF document to Markdown.

    Parameters
    ----------
    tree : Doc or Mapping
        Document tree, as nodes or in wire format
    options : MarkdownRendererOptions or None, default = None
        Rendering options

    Returns
    -------
    str
        Markdown text

    Raises
    ------
    MalformedDocumentError
        If the root is not a ``doc`` node

    Examples
    --------
    >>> adf_to_markdown({"type": "doc", "content": [{"type": "rule"}]})
    '---'

    """
    return MarkdownRenderer(options).render_to_string(tree)
