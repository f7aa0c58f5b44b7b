#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adf2md/options/base.py
"""Base classes for parser and renderer options.

Options are frozen dataclasses: create a modified copy with
``create_updated()`` instead of mutating an instance.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for all renderer options.

    Renderers convert ADF trees into an output format (Markdown, HTML).
    Subclasses define format-specific options as frozen dataclass fields
    and validate them in ``__post_init__``.

    """

    def __post_init__(self) -> None:
        """Validate field values; subclasses extend this."""
        pass


@dataclass(frozen=True)
class BaseParserOptions(CloneFrozenMixin):
    """Base class for all parser options.

    Parsers convert source text into an ADF tree.

    """

    def __post_init__(self) -> None:
        """Validate field values; subclasses extend this."""
        pass
