#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for HTML rendering."""
# src/adf2md/options/html.py


from __future__ import annotations

from dataclasses import dataclass, field

from adf2md.constants import (
    DEFAULT_HTML_LANGUAGE,
    DEFAULT_IMAGE_ALT_TEXT,
    DEFAULT_INLINE_CARD_MAX_PATH,
    DEFAULT_MEDIA_PLACEHOLDER_HTML,
)
from adf2md.options.base import BaseRendererOptions


@dataclass(frozen=True)
class HtmlRendererOptions(BaseRendererOptions):
    """Configuration options for ADF-to-HTML rendering.

    Parameters
    ----------
    standalone : bool, default False
        Wrap the rendered fragment in a complete HTML document with
        embedded CSS for panels, mentions, cards and media placeholders
    title : str, default "Document"
        Document title used in standalone mode
    language : str, default "en"
        ``lang`` attribute used in standalone mode
    media_placeholder : str
        Text of the placeholder shown for media missing from the media map
    image_alt_text : str, default "Image"
        Alt text for resolved media without their own ``alt`` attribute
    inline_card_max_path : int, default 30
        Inline card paths longer than this are shortened to their tail

    """

    standalone: bool = field(
        default=False,
        metadata={"help": "Generate a complete HTML document", "importance": "core"},
    )
    title: str = field(
        default="Document",
        metadata={"help": "Document title for standalone output", "importance": "advanced"},
    )
    language: str = field(
        default=DEFAULT_HTML_LANGUAGE,
        metadata={"help": "Document language for standalone output", "importance": "advanced"},
    )
    media_placeholder: str = field(
        default=DEFAULT_MEDIA_PLACEHOLDER_HTML,
        metadata={"help": "Placeholder text for unresolved media", "importance": "advanced"},
    )
    image_alt_text: str = field(
        default=DEFAULT_IMAGE_ALT_TEXT,
        metadata={"help": "Default alt text for resolved media", "importance": "advanced"},
    )
    inline_card_max_path: int = field(
        default=DEFAULT_INLINE_CARD_MAX_PATH,
        metadata={"help": "Path length above which inline card URLs are shortened", "type": int},
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        super().__post_init__()
        if self.inline_card_max_path < 1:
            raise ValueError(f"inline_card_max_path must be positive, got {self.inline_card_max_path}")
