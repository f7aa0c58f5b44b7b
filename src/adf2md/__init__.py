"""adf2md - Bidirectional conversion between ADF documents, Markdown and HTML.

ADF (Atlassian Document Format) is the JSON document tree used by Jira and
Confluence for rich text. adf2md converts:

- ADF to Markdown, for editing or display as plain text
- Markdown to ADF, for submitting edited text back as a document
- ADF to HTML, for rendering with attachments resolved through a media map

Conversions are pure functions over in-memory values: nothing touches the
network or the filesystem (the ``adf2md`` command line tool aside).

Requirements
------------
- Python 3.10+
- mistune 3 for Markdown parsing (imported lazily)

Examples
--------
Markdown to ADF and back:

    >>> from adf2md import adf_to_markdown, markdown_to_adf
    >>> doc = markdown_to_adf("# Title\\n\\n- one\\n- two")
    >>> print(adf_to_markdown(doc))
    # Title
    <BLANKLINE>
    - one
    - two

Rendering a wire-format document to HTML:

    >>> from adf2md import adf_to_html
    >>> adf_to_html({"type": "doc", "content": [{"type": "rule"}]})
    '<hr>\\n'

See Also
--------
adf2md.ast : Node and mark definitions, wire-format serialization

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# Check Python version before any imports
import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "adf2md requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from adf2md import ast  # noqa: E402
from adf2md.api import (  # noqa: E402
    adf_to_html,
    adf_to_markdown,
    markdown_to_adf,
    markdown_to_adf_dict,
    markdown_to_html,
)
from adf2md.exceptions import (  # noqa: E402
    Adf2MdError,
    ConfigError,
    DependencyError,
    InvalidOptionsError,
    MalformedDocumentError,
    ParsingError,
    ValidationError,
)
from adf2md.options import (  # noqa: E402
    BaseParserOptions,
    BaseRendererOptions,
    HtmlRendererOptions,
    MarkdownParserOptions,
    MarkdownRendererOptions,
)

__all__ = [
    "__version__",
    "adf_to_html",
    "adf_to_markdown",
    "markdown_to_adf",
    "markdown_to_adf_dict",
    "markdown_to_html",
    # Options
    "BaseParserOptions",
    "BaseRendererOptions",
    "HtmlRendererOptions",
    "MarkdownParserOptions",
    "MarkdownRendererOptions",
    # Exceptions
    "Adf2MdError",
    "ConfigError",
    "DependencyError",
    "InvalidOptionsError",
    "MalformedDocumentError",
    "ParsingError",
    "ValidationError",
    # Tree model
    "ast",
]
