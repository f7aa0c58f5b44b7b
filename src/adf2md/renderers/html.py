#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adf2md/renderers/html.py
"""HTML rendering from ADF trees.

This module provides the HtmlRenderer class which converts ADF nodes to
an HTML fragment, or to a standalone document with embedded CSS. Media
nodes are resolved through a caller-supplied map from media id to a
displayable URI; unresolved media render as a placeholder.

All text and attribute values are escaped, and URLs with script-capable
schemes are replaced by ``#``.

"""

from __future__ import annotations

import logging
from typing import Mapping, Optional, Union

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
from adf2md.constants import (
    DEFAULT_EXPAND_TITLE,
    DEFAULT_HEADING_LEVEL,
    DEFAULT_MENTION_TEXT,
    DEFAULT_PANEL_TYPE,
    KNOWN_PANEL_TYPES,
)
from adf2md.options.html import HtmlRendererOptions
from adf2md.renderers.base import BaseRenderer, DocumentInput, InlineContentMixin
from adf2md.utils.decorators import debug_timer
from adf2md.utils.html_utils import escape_html, is_css_color, sanitize_url, truncate_url

logger = logging.getLogger(__name__)

MediaMap = Mapping[str, str]


class HtmlRenderer(NodeVisitor, InlineContentMixin, BaseRenderer):
    """Render ADF nodes to HTML.

    Parameters
    ----------
    options : HtmlRendererOptions or None, default = None
        HTML rendering options
    media_map : Mapping[str, str] or None, default = None
        Media id to displayable URI (http(s) or data URI)

    Examples
    --------
        >>> from adf2md.ast import Doc, Paragraph, Strong, Text
        >>> doc = Doc(content=[Paragraph(content=[Text(text="Hi", marks=[Strong()])])])
        >>> HtmlRenderer().render_to_string(doc)
        '<p><strong>Hi</strong></p>\\n'

    """

    def __init__(self, options: HtmlRendererOptions | None = None, media_map: Optional[MediaMap] = None):
        """Initialize the HTML renderer with options and a media map."""
        BaseRenderer._validate_options_type(options, HtmlRendererOptions, "html")
        options = options or HtmlRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: HtmlRendererOptions = options
        self.media_map: MediaMap = media_map or {}
        self._output: list[str] = []

    def render_to_string(self, doc: DocumentInput) -> str:
        """Render a document to an HTML string.

        Parameters
        ----------
        doc : Doc or Mapping
            The document to render, as nodes or in wire format

        Returns
        -------
        str
            HTML fragment, or a complete document in standalone mode

        Raises
        ------
        MalformedDocumentError
            If the root is not a ``doc`` node

        """
        document = self._coerce_document(doc)
        self._output = []

        with debug_timer(logger, "Rendering (html)"):
            document.accept(self)

        content = "".join(self._output)
        self._output = []

        if self.options.standalone:
            return self._wrap_in_document(content)
        return content

    def _wrap_in_document(self, content: str) -> str:
        """Wrap content in a complete HTML document with embedded CSS."""
        parts = [
            "<!DOCTYPE html>",
            f'<html lang="{escape_html(self.options.language)}">',
            "<head>",
            '<meta charset="UTF-8">',
            '<meta name="viewport" content="width=device-width, initial-scale=1.0">',
            f"<title>{escape_html(self.options.title)}</title>",
            "<style>",
            self._generate_default_css(),
            "</style>",
            "</head>",
            "<body>",
            "<main>",
            content,
            "</main>",
            "</body>",
            "</html>",
        ]
        return "\n".join(parts)

    def _generate_default_css(self) -> str:
        """Generate the default stylesheet for standalone documents."""
        return """
body {
    font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, "Helvetica Neue", Arial, sans-serif;
    line-height: 1.6;
    max-width: 800px;
    margin: 0 auto;
    padding: 2rem;
    color: #172b4d;
}

pre {
    background: #f4f5f7;
    padding: 12px;
    border-radius: 4px;
    overflow-x: auto;
}

code {
    background: #f4f5f7;
    padding: 2px 6px;
    border-radius: 3px;
    font-size: 0.9em;
}

pre code {
    background: none;
    padding: 0;
}

blockquote {
    margin: 12px 0;
    padding: 8px 16px;
    border-left: 3px solid #dfe1e6;
    color: #5e6c84;
}

table {
    border-collapse: collapse;
    margin: 12px 0;
    width: 100%;
}

th, td {
    border: 1px solid #dfe1e6;
    padding: 8px 12px;
    text-align: left;
}

th {
    background: #f4f5f7;
    font-weight: 600;
}

.panel {
    margin: 12px 0;
    padding: 12px 16px;
    border-radius: 4px;
    border-left: 4px solid;
}

.panel-info { background: #deebff; border-left-color: #0052cc; }
.panel-note { background: #eae6ff; border-left-color: #6554c0; }
.panel-warning { background: #fffae6; border-left-color: #ffab00; }
.panel-error { background: #ffebe6; border-left-color: #de350b; }
.panel-success { background: #e3fcef; border-left-color: #36b37e; }

.panel-title {
    font-weight: 600;
    margin-bottom: 4px;
    text-transform: uppercase;
    font-size: 0.75em;
    letter-spacing: 0.5px;
}

details {
    margin: 12px 0;
    border: 1px solid #dfe1e6;
    border-radius: 4px;
}

summary {
    padding: 8px 12px;
    cursor: pointer;
    background: #f4f5f7;
}

details > div {
    padding: 12px;
}

.mention {
    background: #dfe1e6;
    padding: 2px 6px;
    border-radius: 3px;
    font-size: 0.9em;
}

.media-placeholder {
    display: inline-block;
    padding: 8px 12px;
    border: 1px dashed #c1c7d0;
    border-radius: 4px;
    color: #5e6c84;
    font-size: 0.85em;
    font-style: italic;
}

.inline-image {
    max-width: 100%;
    height: auto;
    display: block;
}

.inline-card {
    padding: 2px 8px;
    background: #f4f5f7;
    border-radius: 3px;
    font-size: 0.9em;
}
"""

    def _wrap_mark(self, content: str, mark: Mark) -> str:
        """Wrap already-escaped ``content`` in the element for ``mark``."""
        if isinstance(mark, Strong):
            return f"<strong>{content}</strong>"
        elif isinstance(mark, Em):
            return f"<em>{content}</em>"
        elif isinstance(mark, Strike):
            return f"<del>{content}</del>"
        elif isinstance(mark, Code):
            return f"<code>{content}</code>"
        elif isinstance(mark, Underline):
            return f"<u>{content}</u>"
        elif isinstance(mark, Link):
            href = escape_html(sanitize_url(mark.href))
            title_attr = f' title="{escape_html(mark.title)}"' if mark.title else ""
            return f'<a href="{href}"{title_attr}>{content}</a>'
        elif isinstance(mark, SubSup):
            tag = "sup" if mark.type == "sup" else "sub"
            return f"<{tag}>{content}</{tag}>"
        elif isinstance(mark, (TextColor, BackgroundColor)):
            if not is_css_color(mark.color):
                logger.debug("Dropping %s mark with invalid colour %r", mark.kind, mark.color)
                return content
            prop = "color" if isinstance(mark, TextColor) else "background-color"
            return f'<span style="{prop}: {escape_html(mark.color.strip())}">{content}</span>'
        logger.debug("Ignoring unsupported mark %r", mark.kind)
        return content

    def _render_children(self, nodes: list[Node]) -> None:
        for child in nodes:
            child.accept(self)

    def _media_placeholder(self) -> str:
        return f'<div class="media-placeholder">{escape_html(self.options.media_placeholder)}</div>'

    # ------------------------------------------------------------------
    # Block nodes
    # ------------------------------------------------------------------

    def visit_doc(self, node: Doc) -> None:
        """Render the document's blocks in order."""
        self._render_children(node.content)

    def visit_paragraph(self, node: Paragraph) -> None:
        """Render a Paragraph node."""
        self._output.append(f"<p>{self._render_inline_content(node.content)}</p>\n")

    def visit_heading(self, node: Heading) -> None:
        """Render a Heading node, clamping the level to 1-6."""
        level = min(6, max(1, node.level or DEFAULT_HEADING_LEVEL))
        self._output.append(f"<h{level}>{self._render_inline_content(node.content)}</h{level}>\n")

    def visit_blockquote(self, node: Blockquote) -> None:
        """Render a Blockquote node."""
        self._output.append("<blockquote>\n")
        self._render_children(node.content)
        self._output.append("</blockquote>\n")

    def visit_bullet_list(self, node: BulletList) -> None:
        """Render a BulletList node."""
        self._output.append("<ul>\n")
        self._render_children(node.content)
        self._output.append("</ul>\n")

    def visit_ordered_list(self, node: OrderedList) -> None:
        """Render an OrderedList node; ``start`` is emitted when it is not 1."""
        start_attr = f' start="{node.order}"' if node.order is not None and node.order != 1 else ""
        self._output.append(f"<ol{start_attr}>\n")
        self._render_children(node.content)
        self._output.append("</ol>\n")

    def visit_list_item(self, node: ListItem) -> None:
        """Render a ListItem node with its blocks inside."""
        self._output.append("<li>")
        self._render_children(node.content)
        self._output.append("</li>\n")

    def visit_code_block(self, node: CodeBlock) -> None:
        """Render a CodeBlock node with escaped raw code."""
        class_attr = f' class="language-{escape_html(node.language)}"' if node.language else ""
        self._output.append(f"<pre><code{class_attr}>{escape_html(node.code)}</code></pre>\n")

    def visit_rule(self, node: Rule) -> None:
        """Render a Rule node."""
        self._output.append("<hr>\n")

    def visit_table(self, node: Table) -> None:
        """Render a Table node.

        The first row becomes the ``<thead>`` when it holds a header cell;
        all other rows go to ``<tbody>``.

        """
        rows = list(node.content)
        header_rows: list[Node] = []
        if rows and isinstance(rows[0], TableRow) and rows[0].has_header_cell:
            header_rows, rows = rows[:1], rows[1:]

        self._output.append("<table>\n")
        if header_rows:
            self._output.append("<thead>\n")
            self._render_children(header_rows)
            self._output.append("</thead>\n")
        if rows:
            self._output.append("<tbody>\n")
            self._render_children(rows)
            self._output.append("</tbody>\n")
        self._output.append("</table>\n")

    def visit_table_row(self, node: TableRow) -> None:
        """Render a TableRow node."""
        self._output.append("<tr>")
        self._render_children(node.content)
        self._output.append("</tr>\n")

    def _render_cell(self, tag: str, node: TableCell) -> None:
        span_attrs = ""
        if node.colspan is not None and node.colspan > 1:
            span_attrs += f' colspan="{node.colspan}"'
        if node.rowspan is not None and node.rowspan > 1:
            span_attrs += f' rowspan="{node.rowspan}"'
        self._output.append(f"<{tag}{span_attrs}>")
        self._render_children(node.content)
        self._output.append(f"</{tag}>")

    def visit_table_header(self, node: TableHeader) -> None:
        """Render a TableHeader cell."""
        self._render_cell("th", node)

    def visit_table_cell(self, node: TableCell) -> None:
        """Render a TableCell node."""
        self._render_cell("td", node)

    def visit_panel(self, node: Panel) -> None:
        """Render a Panel node.

        Unknown panel types get the ``info`` style but keep their own name
        in the title.

        """
        panel_type = node.panel_type or DEFAULT_PANEL_TYPE
        style = panel_type if panel_type in KNOWN_PANEL_TYPES else DEFAULT_PANEL_TYPE
        self._output.append(f'<div class="panel panel-{style}">\n')
        self._output.append(f'<div class="panel-title">{escape_html(panel_type)}</div>\n')
        self._render_children(node.content)
        self._output.append("</div>\n")

    def visit_expand(self, node: Expand) -> None:
        """Render an Expand or NestedExpand node as a details element."""
        title = node.title or DEFAULT_EXPAND_TITLE
        self._output.append(f"<details>\n<summary>{escape_html(title)}</summary>\n<div>")
        self._render_children(node.content)
        self._output.append("</div>\n</details>\n")

    def visit_media_single(self, node: MediaSingle) -> None:
        """Render the Media child of a MediaSingle, or the placeholder."""
        media = node.media
        if media is None:
            self._output.append(self._media_placeholder())
        else:
            media.accept(self)
        self._output.append("\n")

    def visit_media(self, node: Media) -> None:
        """Render a Media node as an image if its id is in the media map."""
        uri = self.media_map.get(node.id) if node.id else None
        if not uri:
            self._output.append(self._media_placeholder())
            return
        alt = node.alt or self.options.image_alt_text
        src = escape_html(sanitize_url(uri))
        self._output.append(f'<img src="{src}" class="inline-image" alt="{escape_html(alt)}">')

    # ------------------------------------------------------------------
    # Inline nodes
    # ------------------------------------------------------------------

    def visit_hard_break(self, node: HardBreak) -> None:
        """Render a HardBreak node."""
        self._output.append("<br>")

    def visit_mention(self, node: Mention) -> None:
        """Render a Mention node."""
        self._output.append(f'<span class="mention">{escape_html(node.text or DEFAULT_MENTION_TEXT)}</span>')

    def visit_emoji(self, node: Emoji) -> None:
        """Render an Emoji node as its short name."""
        self._output.append(f'<span class="emoji">{escape_html(node.short_name or "")}</span>')

    def visit_inline_card(self, node: InlineCard) -> None:
        """Render an InlineCard node as a link with a shortened label."""
        url = node.url or ""
        href = escape_html(sanitize_url(url))
        label = escape_html(truncate_url(url, max_path=self.options.inline_card_max_path))
        self._output.append(f'<a href="{href}" class="inline-card">{label}</a>')

    def visit_text(self, node: Text) -> None:
        """Render a Text node, escaping it before applying marks."""
        self._output.append(apply_marks(escape_html(node.text), node.marks, self._wrap_mark))

    def visit_unknown(self, node: UnknownNode) -> None:
        """Render an unknown node as its text, or else its children."""
        if node.text is not None:
            self._output.append(apply_marks(escape_html(node.text), node.marks, self._wrap_mark))
            return
        logger.debug("Rendering children of unknown node %r", node.kind)
        self._render_children(node.content)


def adf_to_html(
    tree: Union[Doc, Mapping],
    media_map: Optional[MediaMap] = None,
    options: HtmlRendererOptions | None = None,
) -> str:
    """Convert an ADF document to HTML.

    Parameters
    ----------
    tree : Doc or Mapping
        Document tree, as nodes or in wire format
    media_map : Mapping[str, str] or None, default = None
        Media id to displayable URI; missing ids render a placeholder
    options : HtmlRendererOptions or None, default = None
        Rendering options

    Returns
    -------
    str
        HTML fragment, or a complete document when ``options.standalone``

    Raises
    ------
    MalformedDocumentError
        If the root is not a ``doc`` node

    """
    return HtmlRenderer(options, media_map=media_map).render_to_string(tree)
