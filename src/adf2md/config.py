#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adf2md/config.py
"""Configuration file discovery and loading.

Configuration files hold one table per converter::

    [parser]
    parse_tables = false

    [markdown]
    list_indent_width = 4

    [html]
    standalone = true

Supported files are ``.adf2md.toml``, ``.adf2md.yaml``/``.yml``,
``.adf2md.json`` and the ``[tool.adf2md]`` section of ``pyproject.toml``.
"""

from __future__ import annotations

import json
import logging
import sys
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]

import yaml

from adf2md.constants import CONFIG_FILENAMES
from adf2md.exceptions import ConfigError
from adf2md.options.base import CloneFrozenMixin
from adf2md.options.html import HtmlRendererOptions
from adf2md.options.markdown import MarkdownParserOptions, MarkdownRendererOptions

logger = logging.getLogger(__name__)

_SECTION_CLASSES: Dict[str, type[CloneFrozenMixin]] = {
    "parser": MarkdownParserOptions,
    "markdown": MarkdownRendererOptions,
    "html": HtmlRendererOptions,
}


@dataclass(frozen=True)
class ConverterOptions:
    """Options for every converter, as loaded from a configuration file."""

    parser: MarkdownParserOptions = field(default_factory=MarkdownParserOptions)
    markdown: MarkdownRendererOptions = field(default_factory=MarkdownRendererOptions)
    html: HtmlRendererOptions = field(default_factory=HtmlRendererOptions)


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the [tool.adf2md] section from pyproject.toml.

    Returns
    -------
    dict
        The section, or an empty dict when the file has none

    Raises
    ------
    ConfigError
        If the file is not valid TOML or the section is not a table

    """
    data = _load_toml_config(pyproject_path)
    config = data.get("tool", {}).get("adf2md", {})
    if not isinstance(config, dict):
        raise ConfigError(
            f"[tool.adf2md] section must be a table, got {type(config).__name__}",
            config_path=str(pyproject_path),
        )
    return config


def find_config_file(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file by searching parent directories.

    Walks up from ``start_dir`` (default: the working directory) to the
    filesystem root. In each directory the dedicated config files are
    checked first; ``pyproject.toml`` only counts when it has a
    ``[tool.adf2md]`` section.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory for the search

    Returns
    -------
    Path or None
        Path to the first config file found

    """
    current = (start_dir or Path.cwd()).resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if not config_path.is_file():
                continue
            if filename != "pyproject.toml":
                return config_path
            try:
                if _load_pyproject_section(config_path):
                    return config_path
            except ConfigError:
                logger.debug(f"Skipping unreadable {config_path}")

        parent = current.parent
        if parent == current:
            return None
        current = parent


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from a TOML, YAML, JSON or pyproject.toml file.

    The format is chosen from the file name and extension.

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file

    Returns
    -------
    dict
        Configuration dictionary

    Raises
    ------
    ConfigError
        If the file is missing, unreadable, malformed or of an unsupported type

    """
    config_path = Path(config_path)

    if not config_path.is_file():
        raise ConfigError(f"Configuration file does not exist: {config_path}", config_path=str(config_path))

    filename = config_path.name.lower()
    ext = config_path.suffix.lower()

    if filename == "pyproject.toml":
        return _load_pyproject_section(config_path)
    elif ext == ".toml":
        return _load_toml_config(config_path)
    elif ext in (".yaml", ".yml"):
        return _load_yaml_config(config_path)
    elif ext == ".json":
        return _load_json_config(config_path)
    raise ConfigError(
        f"Unsupported config file format: {ext}. Use .toml, .yaml or .json", config_path=str(config_path)
    )


def _load_toml_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in config file {config_path}: {e}", str(config_path), e) from e
    except OSError as e:
        raise ConfigError(f"Error reading config file {config_path}: {e}", str(config_path), e) from e


def _load_json_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in config file {config_path}: {e}", str(config_path), e) from e
    except OSError as e:
        raise ConfigError(f"Error reading config file {config_path}: {e}", str(config_path), e) from e

    if not isinstance(config, dict):
        raise ConfigError(
            f"JSON config file must contain an object, got {type(config).__name__}", config_path=str(config_path)
        )
    return config


def _load_yaml_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file {config_path}: {e}", str(config_path), e) from e
    except OSError as e:
        raise ConfigError(f"Error reading config file {config_path}: {e}", str(config_path), e) from e

    # An empty YAML document loads as None
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigError(
            f"YAML config file must contain a mapping, got {type(config).__name__}", config_path=str(config_path)
        )
    return config


def options_from_config(config: Dict[str, Any]) -> ConverterOptions:
    """Build converter options from a loaded configuration dictionary.

    Parameters
    ----------
    config : dict
        Configuration with optional ``parser``, ``markdown`` and ``html`` tables

    Returns
    -------
    ConverterOptions
        Options with defaults for anything the configuration leaves out

    Raises
    ------
    ConfigError
        If a section or key is unknown, or a value fails validation

    Examples
    --------
    >>> options_from_config({"markdown": {"list_indent_width": 4}}).markdown.list_indent_width
    4

    """
    unknown_sections = sorted(set(config) - set(_SECTION_CLASSES))
    if unknown_sections:
        raise ConfigError(f"Unknown configuration sections: {unknown_sections}")

    built: Dict[str, Any] = {}
    for section, options_class in _SECTION_CLASSES.items():
        values = config.get(section, {})
        if not isinstance(values, dict):
            raise ConfigError(f"Configuration section [{section}] must be a table, got {type(values).__name__}")

        known = {f.name for f in fields(options_class)}
        unknown_keys = sorted(set(values) - known)
        if unknown_keys:
            raise ConfigError(f"Unknown keys in [{section}]: {unknown_keys}")

        try:
            built[section] = options_class(**values)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid value in [{section}]: {e}", original_error=e) from e

    return ConverterOptions(**built)


__all__ = [
    "ConverterOptions",
    "find_config_file",
    "load_config_file",
    "options_from_config",
]
