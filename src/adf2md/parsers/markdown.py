#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adf2md/parsers/markdown.py
"""Markdown to ADF converter.

Tokenization is delegated to mistune; this module only shapes mistune's
block/inline token stream into an ADF tree. Nested inline tokens (strong,
emphasis, strikethrough, links) are flattened into text runs, each run
carrying the marks of every token that encloses it, innermost first.

Parsing is total: any string produces a ``doc`` with at least one block,
and constructs without an ADF mapping are dropped.

"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Optional, Protocol, Union

from adf2md.ast import (
    Blockquote,
    BulletList,
    Code,
    CodeBlock,
    Doc,
    Em,
    HardBreak,
    Heading,
    Link,
    ListItem,
    Mark,
    Node,
    OrderedList,
    Paragraph,
    Rule,
    Strike,
    Strong,
    Table,
    TableCell,
    TableHeader,
    TableRow,
    Text,
    has_mark,
)
from adf2md.constants import DEFAULT_HEADING_LEVEL, DEPS_MARKDOWN
from adf2md.options.markdown import MarkdownParserOptions
from adf2md.parsers.base import BaseParser
from adf2md.utils.decorators import debug_timer, requires_dependencies

logger = logging.getLogger(__name__)

Token = dict[str, Any]


class MarkdownTokenizer(Protocol):
    """Anything that turns Markdown text into mistune-shaped block tokens."""

    def tokenize(self, markdown: str) -> list[Token]:
        """Return the block token stream for ``markdown``."""
        ...


class MistuneTokenizer:
    """Block/inline tokenizer backed by mistune's AST mode.

    A fresh mistune instance is created per call, so one tokenizer can be
    shared between threads.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Selects which mistune plugins are enabled

    """

    def __init__(self, options: MarkdownParserOptions | None = None):
        """Initialize the tokenizer with plugin options."""
        self.options = options or MarkdownParserOptions()

    @property
    def plugins(self) -> list[str]:
        """Mistune plugins enabled by the options."""
        plugins = []
        if self.options.parse_strikethrough:
            plugins.append("strikethrough")
        if self.options.parse_tables:
            plugins.append("table")
        return plugins

    @requires_dependencies("markdown", DEPS_MARKDOWN)
    def tokenize(self, markdown: str) -> list[Token]:
        """Tokenize ``markdown`` into mistune block tokens."""
        import mistune

        parser = mistune.create_markdown(plugins=self.plugins, renderer=None)
        tokens, _state = parser.parse(markdown)
        if isinstance(tokens, list):
            return tokens
        logger.debug("Unexpected mistune result of type %s, treating as empty", type(tokens).__name__)
        return []


class MarkdownToAdfParser(BaseParser):
    r"""Convert Markdown to an ADF document.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Parser configuration options
    tokenizer : MarkdownTokenizer or None, default = None
        Token source; defaults to :class:`MistuneTokenizer`

    Examples
    --------
        >>> parser = MarkdownToAdfParser()
        >>> doc = parser.parse("# Hello\n\nThis is **bold**.")
        >>> [child.kind for child in doc.content]
        ['heading', 'paragraph']

    """

    def __init__(self, options: MarkdownParserOptions | None = None, tokenizer: Optional[MarkdownTokenizer] = None):
        """Initialize the Markdown parser with options and tokenizer."""
        BaseParser._validate_options_type(options, MarkdownParserOptions, "markdown")
        options = options or MarkdownParserOptions()
        super().__init__(options)
        self.options: MarkdownParserOptions = options
        self.tokenizer: MarkdownTokenizer = tokenizer or MistuneTokenizer(options)

    def parse(self, input_data: Union[str, bytes]) -> Doc:
        """Parse Markdown text into an ADF document.

        Parameters
        ----------
        input_data : str or bytes
            Markdown text

        Returns
        -------
        Doc
            Document whose content is never empty

        """
        markdown_content = self._load_text_content(input_data)

        with debug_timer(logger, "Parsing (markdown)"):
            tokens = self.tokenizer.tokenize(markdown_content)
            content = self._process_tokens(tokens)

        if not content:
            content = [Paragraph()]
        return Doc(content=content)

    # ------------------------------------------------------------------
    # Block tokens
    # ------------------------------------------------------------------

    def _process_tokens(self, tokens: list[Token]) -> list[Node]:
        """Convert a list of block tokens, dropping those without a mapping."""
        nodes: list[Node] = []
        for token in tokens:
            if not isinstance(token, dict):
                continue
            node = self._process_token(token)
            if node is not None:
                nodes.append(node)
        return nodes

    def _process_token(self, token: Token) -> Node | None:
        """Convert a single block token.

        Returns
        -------
        Node or None
            The node, or None for blank lines and unsupported blocks

        """
        token_type = token.get("type", "")

        if token_type in ("paragraph", "block_text"):
            return self._process_paragraph(token)
        elif token_type == "heading":
            return self._process_heading(token)
        elif token_type == "list":
            return self._process_list(token)
        elif token_type == "block_code":
            return self._process_code_block(token)
        elif token_type == "block_quote":
            return Blockquote(content=self._process_tokens(self._children(token)))
        elif token_type == "thematic_break":
            return Rule()
        elif token_type == "table":
            return self._process_table(token)
        elif token_type != "blank_line":
            logger.debug("Dropping unsupported block token %r", token_type)
        return None

    def _process_paragraph(self, token: Token) -> Paragraph:
        return Paragraph(content=self._process_inline_tokens(self._children(token)))

    def _process_heading(self, token: Token) -> Heading:
        """Process heading token, falling back to level 1 for bad levels."""
        level = self._attrs(token).get("level", DEFAULT_HEADING_LEVEL)
        if not isinstance(level, int) or level < 1 or level > 6:
            level = DEFAULT_HEADING_LEVEL
        return Heading(level=level, content=self._process_inline_tokens(self._children(token)))

    def _process_code_block(self, token: Token) -> CodeBlock:
        """Process a fenced or indented code block.

        The language is the first word of the fence's info string and is
        only set when present. The code is never mark-processed.

        """
        code = token.get("raw", "")
        if not isinstance(code, str):
            code = ""
        if code.endswith("\n"):
            code = code[:-1]

        info = self._attrs(token).get("info")
        language = None
        if isinstance(info, str) and info.strip():
            language = info.strip().split(maxsplit=1)[0]

        return CodeBlock(language=language, content=[Text(text=code)] if code else [])

    def _process_list(self, token: Token) -> BulletList | OrderedList:
        """Process list token into a bullet or ordered list."""
        attrs = self._attrs(token)
        items = [self._process_list_item(child) for child in self._children(token) if isinstance(child, dict)]

        if attrs.get("ordered", False):
            start = attrs.get("start", 1)
            order = start if isinstance(start, int) and start != 1 else None
            return OrderedList(content=items, order=order)
        return BulletList(content=items)

    def _process_list_item(self, token: Token) -> ListItem:
        """Process a list item so that every child is block-level.

        Inline text runs are promoted to paragraphs and nested lists are
        appended after them. An item with no convertible content gets a
        paragraph with the item's raw text.

        """
        content: list[Node] = []
        for child in self._children(token):
            if not isinstance(child, dict):
                continue
            child_type = child.get("type")
            if child_type in ("block_text", "paragraph"):
                content.append(self._process_paragraph(child))
            elif child_type == "list":
                content.append(self._process_list(child))
            else:
                node = self._process_token(child)
                if node is not None:
                    content.append(node)

        if not content:
            raw = self._raw_text(token)
            content.append(Paragraph(content=[Text(text=raw)] if raw else []))
        return ListItem(content=content)

    def _process_table(self, token: Token) -> Table:
        """Process a GFM table; the head row becomes tableHeader cells."""
        rows: list[Node] = []
        for section in self._children(token):
            section_type = section.get("type", "")
            if section_type == "table_head":
                # mistune puts head cells directly under table_head
                cells = [self._process_table_cell(cell, TableHeader) for cell in self._children(section)]
                rows.append(TableRow(content=cells))
            elif section_type == "table_body":
                for row in self._children(section):
                    cells = [self._process_table_cell(cell, TableCell) for cell in self._children(row)]
                    rows.append(TableRow(content=cells))
        return Table(content=rows)

    def _process_table_cell(self, token: Token, cell_class: type[TableCell]) -> TableCell:
        return cell_class(content=[Paragraph(content=self._process_inline_tokens(self._children(token)))])

    # ------------------------------------------------------------------
    # Inline tokens
    # ------------------------------------------------------------------

    def _process_inline_tokens(self, tokens: list[Token]) -> list[Node]:
        """Convert inline tokens into a flat list of inline nodes.

        Neighbouring text runs with identical marks are merged into one run.
        """
        nodes: list[Node] = []
        for token in tokens:
            if not isinstance(token, dict):
                continue
            for node in self._process_inline_token(token):
                previous = nodes[-1] if nodes else None
                if isinstance(node, Text) and isinstance(previous, Text) and previous.marks == node.marks:
                    nodes[-1] = replace(previous, text=previous.text + node.text)
                else:
                    nodes.append(node)
        return nodes

    def _process_inline_token(self, token: Token) -> list[Node]:
        token_type = token.get("type", "")

        if token_type == "text":
            text = token.get("raw", "")
            return [Text(text=text)] if isinstance(text, str) and text else []
        elif token_type == "strong":
            return self._process_marked(token, Strong())
        elif token_type == "emphasis":
            return self._process_marked(token, Em())
        elif token_type == "strikethrough":
            return self._process_marked(token, Strike())
        elif token_type == "codespan":
            code = token.get("raw", "")
            return [Text(text=code, marks=[Code()])] if isinstance(code, str) and code else []
        elif token_type == "link":
            return self._process_link(token)
        elif token_type == "linebreak":
            return [HardBreak()]
        elif token_type == "softbreak":
            return [Text(text="\n")]

        raw = self._raw_text(token)
        if raw:
            logger.debug("Inline token %r degraded to plain text", token_type)
            return [Text(text=raw)]
        logger.debug("Dropping inline token %r without text", token_type)
        return []

    def _process_marked(self, token: Token, mark: Mark) -> list[Node]:
        """Convert the children of a formatting token and append ``mark`` to each run."""
        nodes = self._process_inline_tokens(self._children(token))
        return [self._with_mark(node, mark) for node in nodes]

    def _process_link(self, token: Token) -> list[Node]:
        """Convert a link, falling back to one run of its text or href.

        A link with neither text nor href produces nothing.

        """
        attrs = self._attrs(token)
        href = str(attrs.get("url", "") or "")
        title = attrs.get("title")
        mark = Link(href=href, title=title if isinstance(title, str) and title else None)

        nodes = self._process_inline_tokens(self._children(token))
        if nodes:
            return [self._with_mark(node, mark) for node in nodes]

        text = self._raw_text(token) or href
        if not text:
            logger.debug("Dropping link without text or href")
            return []
        return [Text(text=text, marks=[mark])]

    @staticmethod
    def _with_mark(node: Node, mark: Mark) -> Node:
        """Return ``node`` with ``mark`` appended if it is a text run that accepts it.

        Code runs only accept links on top of their ``code`` mark.

        """
        if not isinstance(node, Text):
            return node
        if has_mark(node.marks, Code) and not isinstance(mark, Link):
            return node
        return replace(node, marks=[*node.marks, mark])

    # ------------------------------------------------------------------
    # Token helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _children(token: Token) -> list[Token]:
        children = token.get("children", [])
        return children if isinstance(children, list) else []

    @staticmethod
    def _attrs(token: Token) -> dict[str, Any]:
        attrs = token.get("attrs", {})
        return attrs if isinstance(attrs, dict) else {}

    @classmethod
    def _raw_text(cls, token: Token) -> str:
        """Return the raw text of a token, or the plain text of its children."""
        for key in ("raw", "text"):
            value = token.get(key)
            if isinstance(value, str) and value:
                return value
        return "".join(cls._raw_text(child) for child in cls._children(token) if isinstance(child, dict))


def markdown_to_adf(markdown_content: Union[str, bytes], options: MarkdownParserOptions | None = None) -> Doc:
    r"""Convert a Markdown string to an ADF document.

    Parameters
    ----------
    markdown_content : str or bytes
        Markdown text to parse
    options : MarkdownParserOptions or None, default = None
        Parser configuration

    Returns
    -------
    Doc
        ADF document; empty input yields one empty paragraph

    Examples
    --------
    >>> doc = markdown_to_adf("Hello world")
    >>> doc.content[0].content[0].text
    'Hello world'

    """
    return MarkdownToAdfParser(options).parse(markdown_content)
