#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adf2md/cli.py
"""Command-line interface for adf2md.

Examples
--------
Render an ADF document as Markdown:
    $ adf2md to-markdown issue.json

Render HTML with resolved attachments into a file:
    $ adf2md to-html issue.json --media-map media.json --standalone -o issue.html

Convert Markdown from stdin to ADF JSON:
    $ echo "# Title" | adf2md from-markdown - --indent 2

Options for the converters are read from ``--config`` or from the first
``.adf2md.toml``/``.adf2md.yaml``/``.adf2md.json``/``pyproject.toml`` found
in the working directory or its parents.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from adf2md import __version__
from adf2md.api import adf_to_html, adf_to_markdown, markdown_to_adf
from adf2md.ast import adf_to_json, json_to_adf
from adf2md.config import ConverterOptions, find_config_file, load_config_file, options_from_config
from adf2md.exceptions import Adf2MdError, ConfigError
from adf2md.logging_utils import configure_logging

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 2


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with one subcommand per conversion."""
    parser = argparse.ArgumentParser(
        prog="adf2md",
        description="Convert between ADF documents, Markdown and HTML.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--config", help="Path to a configuration file (.toml, .yaml, .json or pyproject.toml)")
    parser.add_argument("--no-config", action="store_true", help="Do not search for a configuration file")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)",
    )
    parser.add_argument("--log-file", help="Also write log messages to this file")
    parser.add_argument("--trace", action="store_true", help="Debug logging with timestamps and timings")

    subparsers = parser.add_subparsers(dest="command", required=True)

    to_markdown = subparsers.add_parser("to-markdown", help="Render an ADF JSON document as Markdown")
    to_markdown.add_argument("input", help="ADF JSON file, or '-' for stdin")
    to_markdown.add_argument("-o", "--output", help="Output file (default: stdout)")
    to_markdown.add_argument("--list-indent", type=int, help="Spaces per list nesting level")

    to_html = subparsers.add_parser("to-html", help="Render an ADF JSON document as HTML")
    to_html.add_argument("input", help="ADF JSON file, or '-' for stdin")
    to_html.add_argument("-o", "--output", help="Output file (default: stdout)")
    to_html.add_argument("--media-map", help="JSON object mapping media ids to image URIs")
    to_html.add_argument(
        "--standalone", action="store_true", default=None, help="Emit a complete HTML document with CSS"
    )

    from_markdown = subparsers.add_parser("from-markdown", help="Convert Markdown to an ADF JSON document")
    from_markdown.add_argument("input", help="Markdown file, or '-' for stdin")
    from_markdown.add_argument("-o", "--output", help="Output file (default: stdout)")
    from_markdown.add_argument("--indent", type=int, help="Indent the JSON output by N spaces")

    return parser


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Set up logging; --trace takes precedence over --log-level."""
    log_level = logging.DEBUG if parsed_args.trace else getattr(logging, parsed_args.log_level)
    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def _load_options(parsed_args: argparse.Namespace) -> ConverterOptions:
    """Load converter options from the explicit or discovered config file.

    Raises
    ------
    ConfigError
        If the configuration cannot be loaded or is invalid

    """
    config_path: Optional[Path] = None
    if parsed_args.config:
        config_path = Path(parsed_args.config)
    elif not parsed_args.no_config:
        config_path = find_config_file()

    if config_path is None:
        return ConverterOptions()

    logger.debug(f"Loading configuration from {config_path}")
    return options_from_config(load_config_file(config_path))


def _read_input(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def _write_output(text: str, destination: Optional[str]) -> None:
    if destination:
        Path(destination).write_text(text, encoding="utf-8")
        return
    sys.stdout.write(text if text.endswith("\n") else text + "\n")


def _load_media_map(path: str) -> Dict[str, str]:
    """Load a media map JSON file.

    Raises
    ------
    Adf2MdError
        If the file is not a JSON object of strings

    """
    try:
        data: Any = json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise Adf2MdError(f"Invalid JSON in media map {path}: {e}", original_error=e) from e
    if not isinstance(data, dict) or not all(isinstance(v, str) for v in data.values()):
        raise Adf2MdError(f"Media map {path} must be a JSON object mapping media ids to URIs")
    return {str(key): value for key, value in data.items()}


def _run_command(parsed_args: argparse.Namespace, options: ConverterOptions) -> str:
    """Run the selected conversion and return its output text."""
    text = _read_input(parsed_args.input)

    if parsed_args.command == "to-markdown":
        markdown_options = options.markdown
        if parsed_args.list_indent is not None:
            markdown_options = markdown_options.create_updated(list_indent_width=parsed_args.list_indent)
        return adf_to_markdown(json_to_adf(text), options=markdown_options)

    if parsed_args.command == "to-html":
        html_options = options.html
        if parsed_args.standalone is not None:
            html_options = html_options.create_updated(standalone=parsed_args.standalone)
        media_map = _load_media_map(parsed_args.media_map) if parsed_args.media_map else None
        return adf_to_html(json_to_adf(text), media_map=media_map, options=html_options)

    return adf_to_json(markdown_to_adf(text, options=options.parser), indent=parsed_args.indent)


def main(args: list[str] | None = None) -> int:
    """Execute the CLI and return a process exit code."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    _setup_logging_level(parsed_args)

    try:
        options = _load_options(parsed_args)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    try:
        result = _run_command(parsed_args, options)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR
    except (Adf2MdError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    try:
        _write_output(result, parsed_args.output)
    except OSError as e:
        print(f"Error writing output: {e}", file=sys.stderr)
        return EXIT_ERROR
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
