#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adf2md/constants.py
"""Constants and default values shared across adf2md.

Defaults for parser and renderer options live here so the options
dataclasses, the config loader and the CLI agree on them.
"""

from __future__ import annotations

# Wire format
ADF_VERSION = 1

# Fallbacks for missing attributes
DEFAULT_HEADING_LEVEL = 1
DEFAULT_PANEL_TYPE = "info"
DEFAULT_EXPAND_TITLE = "Details"
DEFAULT_MENTION_TEXT = "@user"

# Markdown rendering defaults
DEFAULT_LIST_INDENT_WIDTH = 2
DEFAULT_BULLET_MARKER = "-"
DEFAULT_MEDIA_PLACEHOLDER_MARKDOWN = "[Media attachment]"

# HTML rendering defaults
DEFAULT_MEDIA_PLACEHOLDER_HTML = "\U0001f4ce Media attachment"
DEFAULT_IMAGE_ALT_TEXT = "Image"
DEFAULT_INLINE_CARD_MAX_PATH = 30
DEFAULT_INLINE_CARD_PATH_TAIL = 20
DEFAULT_INLINE_CARD_MAX_URL = 50
DEFAULT_HTML_LANGUAGE = "en"

KNOWN_PANEL_TYPES = frozenset({"info", "note", "warning", "error", "success"})

# Markdown parser defaults
DEFAULT_PARSE_STRIKETHROUGH = True
DEFAULT_PARSE_TABLES = True

DEPS_MARKDOWN = [("mistune", "mistune")]

# URL safety
DANGEROUS_SCHEMES = {
    "javascript:",
    "vbscript:",
    "data:text/html",
    "data:text/javascript",
    "data:application/javascript",
    "data:application/x-javascript",
}

# Configuration discovery
CONFIG_FILENAMES = [".adf2md.toml", ".adf2md.yaml", ".adf2md.yml", ".adf2md.json", "pyproject.toml"]
