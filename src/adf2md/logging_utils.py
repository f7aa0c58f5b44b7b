#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adf2md/logging_utils.py
"""Logging setup for the adf2md command line tool.

Library code only ever creates module loggers under the ``adf2md``
namespace and never installs handlers; applications embedding adf2md keep
full control of logging. The CLI calls :func:`configure_logging` once per
invocation to attach stderr (and optionally file) handlers to the package
logger.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

PACKAGE_LOGGER_NAME = "adf2md"

_HANDLER_MARKER = "_adf2md_cli_handler"

_DEFAULT_FORMAT = "%(levelname)s: %(message)s"
_TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
_TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _resolve_level(log_level: int | str) -> int:
    if isinstance(log_level, int):
        return log_level
    level = logging.getLevelName(str(log_level).upper())
    return level if isinstance(level, int) else logging.WARNING


def _install_handler(logger: logging.Logger, handler: logging.Handler, level: int, formatter: logging.Formatter) -> None:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    setattr(handler, _HANDLER_MARKER, True)
    logger.addHandler(handler)


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Attach CLI handlers to the ``adf2md`` package logger.

    Handlers installed by an earlier call are replaced; handlers added by
    anyone else are left alone.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or level name (e.g., "DEBUG"); unknown names
        fall back to WARNING
    log_file : str, optional
        Also append log records to this file
    trace_mode : bool, default False
        Include timestamps and logger names, as used by ``--trace``

    Returns
    -------
    logging.Logger
        The configured package logger

    """
    level = _resolve_level(log_level)
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    logger.setLevel(level)

    for handler in [h for h in logger.handlers if getattr(h, _HANDLER_MARKER, False)]:
        logger.removeHandler(handler)
        handler.close()

    if trace_mode:
        formatter = logging.Formatter(_TRACE_FORMAT, datefmt=_TRACE_DATE_FORMAT)
    else:
        formatter = logging.Formatter(_DEFAULT_FORMAT)

    _install_handler(logger, logging.StreamHandler(sys.stderr), level, formatter)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            logger.warning("Could not open log file %s: %s", log_file, exc)
        else:
            _install_handler(logger, file_handler, level, formatter)
            logger.debug("Logging to file: %s", log_file)

    return logger
