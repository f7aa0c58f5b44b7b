#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adf2md/ast/marks.py
"""Inline mark classes and the mark-folding combinator.

Marks annotate a run of text (bold, link, colour, ...). A text node carries
an ordered list of marks; semantically the list is a set, but renderers apply
marks in list order, first mark innermost.

Both the Markdown and HTML renderers wrap content the same way, by folding
the mark list over the base content with a renderer-specific ``wrap``
function::

    >>> from adf2md.ast.marks import Em, Strong, apply_marks
    >>> apply_marks("x", [Strong(), Em()], lambda text, mark: f"<{mark.type_name}>{text}</{mark.type_name}>")
    '<em><strong>x</strong></em>'

"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import reduce
from typing import Any, Callable, ClassVar, Iterable, Literal, TypeVar

T = TypeVar("T")

SubSupType = Literal["sup", "sub"]


class Mark:
    """Base class for all inline marks."""

    type_name: ClassVar[str] = ""

    @property
    def kind(self) -> str:
        """Return the wire-format ``type`` discriminator of this mark."""
        return self.type_name


@dataclass(frozen=True)
class Strong(Mark):
    """Bold text."""

    type_name: ClassVar[str] = "strong"


@dataclass(frozen=True)
class Em(Mark):
    """Italic text."""

    type_name: ClassVar[str] = "em"


@dataclass(frozen=True)
class Strike(Mark):
    """Struck-through text."""

    type_name: ClassVar[str] = "strike"


@dataclass(frozen=True)
class Code(Mark):
    """Inline code. Code runs carry no other formatting marks."""

    type_name: ClassVar[str] = "code"


@dataclass(frozen=True)
class Underline(Mark):
    """Underlined text."""

    type_name: ClassVar[str] = "underline"


@dataclass(frozen=True)
class Link(Mark):
    """Hyperlink mark.

    Parameters
    ----------
    href : str
        Link target
    title : str or None
        Optional link title

    """

    type_name: ClassVar[str] = "link"

    href: str = ""
    title: str | None = None


@dataclass(frozen=True)
class SubSup(Mark):
    """Superscript or subscript, selected by ``type``."""

    type_name: ClassVar[str] = "subsup"

    type: SubSupType = "sub"


@dataclass(frozen=True)
class TextColor(Mark):
    """Foreground colour, e.g. ``#ff5630``."""

    type_name: ClassVar[str] = "textColor"

    color: str = ""


@dataclass(frozen=True)
class BackgroundColor(Mark):
    """Background (highlight) colour."""

    type_name: ClassVar[str] = "backgroundColor"

    color: str = ""


@dataclass(frozen=True)
class UnknownMark(Mark):
    """A mark kind this library does not know.

    Renderers treat unknown marks as a no-op wrap.
    """

    type: str = ""
    attrs: dict[str, Any] = field(default_factory=dict, compare=False, hash=False)

    @property
    def kind(self) -> str:
        """Return the raw ``type`` the mark was decoded from."""
        return self.type


def apply_marks(content: T, marks: Iterable[Mark], wrap: Callable[[T, Mark], T]) -> T:
    """Fold ``marks`` over ``content`` with ``wrap``, first mark innermost.

    Parameters
    ----------
    content : T
        Base content (plain text, rendered HTML, ...)
    marks : iterable of Mark
        Marks in application order
    wrap : callable
        Pure function ``(content, mark) -> content``

    Returns
    -------
    T
        The fully wrapped content

    """
    return reduce(wrap, marks, content)


def has_mark(marks: Iterable[Mark], mark_type: type[Mark]) -> bool:
    """Return True if any mark in ``marks`` is an instance of ``mark_type``."""
    return any(isinstance(mark, mark_type) for mark in marks)


MARK_CLASSES: dict[str, type[Mark]] = {
    cls.type_name: cls for cls in (Strong, Em, Strike, Code, Underline, Link, SubSup, TextColor, BackgroundColor)
}


__all__ = [
    "Mark",
    "Strong",
    "Em",
    "Strike",
    "Code",
    "Underline",
    "Link",
    "SubSup",
    "SubSupType",
    "TextColor",
    "BackgroundColor",
    "UnknownMark",
    "MARK_CLASSES",
    "apply_marks",
    "has_mark",
]
