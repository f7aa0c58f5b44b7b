#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adf2md/api.py
"""Public conversion functions.

Each function accepts an optional options object plus keyword overrides for
individual option fields, e.g. ``adf_to_markdown(doc, list_indent_width=4)``.
Every call builds a fresh parser or renderer, so the functions are safe to
call from several threads at once.
"""

from __future__ import annotations

import logging
from dataclasses import fields
from typing import Any, Mapping, Optional, TypeVar, Union

from adf2md.ast import Doc, adf_to_dict
from adf2md.options.base import CloneFrozenMixin
from adf2md.options.html import HtmlRendererOptions
from adf2md.options.markdown import MarkdownParserOptions, MarkdownRendererOptions
from adf2md.parsers.markdown import MarkdownToAdfParser
from adf2md.renderers.html import HtmlRenderer, MediaMap
from adf2md.renderers.markdown import MarkdownRenderer

logger = logging.getLogger(__name__)

OptionsT = TypeVar("OptionsT", bound=CloneFrozenMixin)


def _create_options_from_kwargs(
    options_class: type[OptionsT],
    options: Optional[OptionsT],
    options_type_name: str,
    **kwargs: Any,
) -> OptionsT:
    """Apply keyword overrides on top of ``options`` (or the class defaults).

    Parameters
    ----------
    options_class : type
        The options class to instantiate when ``options`` is None
    options : OptionsT or None
        Base options object
    options_type_name : str
        Name of the options type for logging (e.g., "parser" or "renderer")
    **kwargs
        Field overrides; unknown names are skipped

    Returns
    -------
    OptionsT
        Options instance with the overrides applied

    """
    base = options if options is not None else options_class()
    if not kwargs:
        return base

    option_names = {field.name for field in fields(options_class)}
    valid_kwargs = {k: v for k, v in kwargs.items() if k in option_names}
    missing = [k for k in kwargs if k not in valid_kwargs]
    if missing:
        logger.debug(f"Skipping unknown {options_type_name} options: {missing}")
    return base.create_updated(**valid_kwargs)


def markdown_to_adf(
    markdown: Union[str, bytes], options: Optional[MarkdownParserOptions] = None, **kwargs: Any
) -> Doc:
    r"""Parse Markdown into an ADF document tree.

    Parameters
    ----------
    markdown : str or bytes
        Markdown source text
    options : MarkdownParserOptions or None, default = None
        Parser options
    kwargs : Any
        Overrides for individual parser option fields

    Returns
    -------
    Doc
        Document with at least one block

    Examples
    --------
        >>> doc = markdown_to_adf("# Title\n\nBody")
        >>> [block.kind for block in doc.content]
        ['heading', 'paragraph']

    """
    parser_options = _create_options_from_kwargs(MarkdownParserOptions, options, "parser", **kwargs)
    return MarkdownToAdfParser(parser_options).parse(markdown)


def markdown_to_adf_dict(
    markdown: Union[str, bytes], options: Optional[MarkdownParserOptions] = None, **kwargs: Any
) -> dict[str, Any]:
    """Parse Markdown and return the ADF wire format (a JSON-compatible dict)."""
    return adf_to_dict(markdown_to_adf(markdown, options, **kwargs))


def adf_to_markdown(
    tree: Union[Doc, Mapping[str, Any]], options: Optional[MarkdownRendererOptions] = None, **kwargs: Any
) -> str:
    """Render an ADF document tree as Markdown.

    Parameters
    ----------
    tree : Doc or Mapping
        Document tree, as nodes or in wire format
    options : MarkdownRendererOptions or None, default = None
        Renderer options
    kwargs : Any
        Overrides for individual renderer option fields

    Returns
    -------
    str
        Markdown text

    Raises
    ------
    MalformedDocumentError
        If the root is not a ``doc`` node

    """
    renderer_options = _create_options_from_kwargs(MarkdownRendererOptions, options, "renderer", **kwargs)
    return MarkdownRenderer(renderer_options).render_to_string(tree)


def adf_to_html(
    tree: Union[Doc, Mapping[str, Any]],
    media_map: Optional[MediaMap] = None,
    options: Optional[HtmlRendererOptions] = None,
    **kwargs: Any,
) -> str:
    """Render an ADF document tree as HTML.

    Parameters
    ----------
    tree : Doc or Mapping
        Document tree, as nodes or in wire format
    media_map : Mapping[str, str] or None, default = None
        Media id to displayable URI
    options : HtmlRendererOptions or None, default = None
        Renderer options
    kwargs : Any
        Overrides for individual renderer option fields

    Returns
    -------
    str
        HTML fragment, or a standalone document

    Raises
    ------
    MalformedDocumentError
        If the root is not a ``doc`` node

    """
    renderer_options = _create_options_from_kwargs(HtmlRendererOptions, options, "renderer", **kwargs)
    return HtmlRenderer(renderer_options, media_map=media_map).render_to_string(tree)


def markdown_to_html(
    markdown: Union[str, bytes],
    media_map: Optional[MediaMap] = None,
    options: Optional[HtmlRendererOptions] = None,
    parser_options: Optional[MarkdownParserOptions] = None,
) -> str:
    """Parse Markdown and render the resulting tree as HTML.

    Examples
    --------
        >>> markdown_to_html("Hello **world**")
        '<p>Hello <strong>world</strong></p>\\n'

    """
    return adf_to_html(markdown_to_adf(markdown, parser_options), media_map=media_map, options=options)


__all__ = [
    "markdown_to_adf",
    "markdown_to_adf_dict",
    "adf_to_markdown",
    "adf_to_html",
    "markdown_to_html",
]
