#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adf2md/parsers/base.py
"""Base classes for document parsers.

Parsers turn source text into an ADF :class:`~adf2md.ast.Doc`.

"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Union

from adf2md.ast import Doc
from adf2md.exceptions import InvalidOptionsError
from adf2md.options.base import BaseParserOptions

logger = logging.getLogger(__name__)


class BaseParser(ABC):
    """Abstract base class for all document parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Format-specific parsing options

    """

    def __init__(self, options: BaseParserOptions | None = None):
        """Initialize the parser with optional configuration."""
        self.options: BaseParserOptions | None = options

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @abstractmethod
    def parse(self, input_data: Union[str, bytes]) -> Doc:
        """Parse the input text into an ADF document.

        Parameters
        ----------
        input_data : str or bytes
            Source text; bytes are decoded as UTF-8

        Returns
        -------
        Doc
            The document root

        """
        pass

    @staticmethod
    def _load_text_content(input_data: Union[str, bytes, None]) -> str:
        """Normalize parser input to text.

        Undecodable bytes are replaced rather than rejected, and ``None``
        reads as empty text, so parsing never fails on its input.

        """
        if input_data is None:
            return ""
        if isinstance(input_data, bytes):
            return input_data.decode("utf-8", errors="replace")
        if isinstance(input_data, str):
            return input_data
        logger.debug("Coercing parser input of type %s to text", type(input_data).__name__)
        return str(input_data)
