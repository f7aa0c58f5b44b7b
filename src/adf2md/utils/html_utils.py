#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adf2md/utils/html_utils.py
"""HTML-related utility helpers."""

from __future__ import annotations

import re
from html import escape as _html_escape
from urllib.parse import urlparse

from adf2md.constants import (
    DANGEROUS_SCHEMES,
    DEFAULT_INLINE_CARD_MAX_PATH,
    DEFAULT_INLINE_CARD_MAX_URL,
    DEFAULT_INLINE_CARD_PATH_TAIL,
)

_CSS_COLOR_PATTERN = re.compile(
    r"^(?:#[0-9a-fA-F]{3,4}|#[0-9a-fA-F]{6}|#[0-9a-fA-F]{8}|[a-zA-Z]+|(?:rgb|rgba|hsl|hsla)\([0-9.,%\s]+\))$"
)


def escape_html(text: str, *, enabled: bool = True) -> str:
    """Escape HTML special characters (including quotes) when enabled."""
    if not enabled:
        return text
    return _html_escape(text)


def is_css_color(value: str) -> bool:
    """Return True if ``value`` is a plain CSS colour (hex, name, or rgb/hsl function).

    Examples
    --------
    >>> is_css_color("#ff0000")
    True
    >>> is_css_color("red;position:fixed")
    False

    """
    return isinstance(value, str) and _CSS_COLOR_PATTERN.match(value.strip()) is not None


def is_url_safe(url: str) -> bool:
    """Return False for URLs with script-capable schemes.

    Examples
    --------
    >>> is_url_safe("https://example.com")
    True
    >>> is_url_safe("javascript:alert(1)")
    False

    """
    if not url or not url.strip():
        return True
    # Browsers ignore embedded whitespace and control characters in schemes
    normalized = "".join(ch for ch in url if ch > " ").lower()
    return not any(normalized.startswith(scheme) for scheme in DANGEROUS_SCHEMES)


def sanitize_url(url: str, replacement: str = "#") -> str:
    """Return ``url`` unchanged if safe, otherwise ``replacement``."""
    return url if is_url_safe(url) else replacement


def truncate_url(
    url: str,
    max_path: int = DEFAULT_INLINE_CARD_MAX_PATH,
    path_tail: int = DEFAULT_INLINE_CARD_PATH_TAIL,
    max_length: int = DEFAULT_INLINE_CARD_MAX_URL,
) -> str:
    """Shorten a URL for display in an inline card.

    Absolute URLs display as hostname plus path; paths longer than
    ``max_path`` keep only their last ``path_tail`` characters. Anything
    that does not parse as an absolute URL is cut to ``max_length``.

    Examples
    --------
    >>> truncate_url("https://example.com/browse/PROJ-1")
    'example.com/browse/PROJ-1'
    >>> truncate_url("https://example.com/wiki/spaces/TEAM/pages/123456/Some+Long+Title")
    'example.com/...3456/Some+Long+Title'

    """
    try:
        parsed = urlparse(url)
        hostname = parsed.hostname if parsed.scheme else None
    except ValueError:
        hostname = None

    if hostname:
        path = parsed.path
        if len(path) > max_path:
            return f"{hostname}/...{path[-path_tail:]}"
        return f"{hostname}{path}"

    if len(url) > max_length:
        return url[: max_length - 3] + "..."
    return url
