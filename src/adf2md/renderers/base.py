#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adf2md/renderers/base.py
"""Base classes for ADF renderers.

This module defines the abstract base class that all renderers inherit from.
The BaseRenderer provides a consistent interface for converting an ADF tree
into an output format, and validates the tree root before any rendering
starts.

"""

from __future__ import annotations

import io
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Any, Mapping, Union

from adf2md.ast import Doc, Node, TableRow, dict_to_adf
from adf2md.exceptions import InvalidOptionsError, MalformedDocumentError
from adf2md.options.base import BaseRendererOptions

DocumentInput = Union[Doc, Mapping[str, Any]]


class BaseRenderer(ABC):
    """Abstract base class for all ADF renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    Examples
    --------
    Creating a custom renderer:

        >>> from adf2md.renderers.base import BaseRenderer
        >>>
        >>> class NodeCountRenderer(BaseRenderer):
        ...     def render_to_string(self, doc):
        ...         return str(len(self._coerce_document(doc).content))

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render_to_string(self, doc: DocumentInput) -> str:
        """Render the tree to a string.

        Parameters
        ----------
        doc : Doc or Mapping
            Document tree, either as nodes or in wire format

        Returns
        -------
        str
            Rendered document

        Raises
        ------
        MalformedDocumentError
            If the root is not a ``doc`` node

        """
        pass

    def render(self, doc: DocumentInput, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render the tree and write it to a file path or stream.

        Parameters
        ----------
        doc : Doc or Mapping
            Document tree to render
        output : str, Path, IO[bytes] or IO[str]
            Output destination

        """
        self.write_text_output(self.render_to_string(doc), output)

    @staticmethod
    def _coerce_document(doc: DocumentInput) -> Doc:
        """Return ``doc`` as a Doc node, decoding wire-format mappings.

        Raises
        ------
        MalformedDocumentError
            If the input is neither a Doc nor a mapping whose root kind is ``doc``

        """
        if isinstance(doc, Mapping):
            doc = dict_to_adf(doc)  # type: ignore[assignment]
        elif not isinstance(doc, Node):
            raise MalformedDocumentError(
                f"Expected a Doc node or mapping, got {type(doc).__name__}",
                received=doc,
            )

        if not isinstance(doc, Doc):
            raise MalformedDocumentError(f"Root node must be of type 'doc', got {doc.kind!r}", received=doc)
        return doc

    @staticmethod
    def _compute_table_columns(rows: list[TableRow]) -> int:
        """Compute the maximum number of cells in any row of a table.

        Parameters
        ----------
        rows : list[TableRow]
            All table rows, header included

        Returns
        -------
        int
            Maximum cell count

        """
        return max((len(row.content) for row in rows), default=0)

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Parameters
        ----------
        options : BaseRendererOptions or None
            The options object to validate
        expected_type : type
            The expected options class type
        renderer_name : str
            Name of the renderer (for error messages)

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @staticmethod
    def write_text_output(text: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Write text output to a file path or IO stream.

        Binary streams receive UTF-8 encoded bytes.

        Raises
        ------
        TypeError
            If output type is not supported

        Examples
        --------
            >>> from io import BytesIO
            >>> buffer = BytesIO()
            >>> BaseRenderer.write_text_output("# Hello", buffer)
            >>> buffer.getvalue()
            b'# Hello'

        """
        if isinstance(output, (str, Path)):
            Path(output).write_text(text, encoding="utf-8")
            return

        if not hasattr(output, "write"):
            raise TypeError(f"Unsupported output type: {type(output)}")

        if isinstance(output, io.TextIOBase):
            is_binary_mode = False
        elif isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
            is_binary_mode = True
        else:
            mode = getattr(output, "mode", "")
            is_binary_mode = isinstance(mode, str) and "b" in mode

        if is_binary_mode:
            output.write(text.encode("utf-8"))  # type: ignore[arg-type]
        else:
            output.write(text)  # type: ignore[arg-type]


class InlineContentMixin:
    """Mixin providing the inline content capture pattern for text renderers.

    The implementing class must have:
    - A `_output` attribute (list[str]) for accumulating output
    - Visitor methods that append to `_output`

    """

    _output: list[str]

    def _render_inline_content(self, content: list[Node]) -> str:
        """Render a list of nodes to text by temporarily capturing output.

        Parameters
        ----------
        content : list of Node
            Nodes to render

        Returns
        -------
        str
            Rendered content as a string

        """
        saved_output = self._output
        self._output = []

        for node in content:
            node.accept(self)

        result = "".join(self._output)
        self._output = saved_output
        return result
