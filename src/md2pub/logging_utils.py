#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2pub/logging_utils.py
"""Logging setup for the md2pub command line tool.

Handlers are attached to the ``md2pub`` package logger rather than the root
logger, so a host application that publishes documents through the library
keeps its own logging configuration. Every module logger
(``logging.getLogger(__name__)``) sits under the package logger and reports
through it.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

PACKAGE_LOGGER_NAME = "md2pub"

TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
PLAIN_FORMAT = "%(levelname)s: %(message)s"

# Set on handlers installed by configure_logging
_HANDLER_MARKER = "_md2pub_handler"


def resolve_log_level(log_level: int | str, trace_mode: bool = False) -> int:
    """Turn a level name or number into a numeric logging level.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or string name (e.g., "INFO").
    trace_mode : bool, default False
        Trace mode always logs at DEBUG.

    Returns
    -------
    int
        Numeric level; unknown names resolve to INFO.

    """
    if trace_mode:
        return logging.DEBUG
    if isinstance(log_level, int):
        return log_level
    resolved = getattr(logging, str(log_level).upper(), None)
    return resolved if isinstance(resolved, int) else logging.INFO


def _install(logger: logging.Logger, handler: logging.Handler, level: int, formatter: logging.Formatter) -> None:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    setattr(handler, _HANDLER_MARKER, True)
    logger.addHandler(handler)


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Configure the md2pub package logger for a command line run.

    Handlers from an earlier call are replaced; handlers added by anyone else
    are left in place. The package logger stops propagating to the root
    logger so records are not printed twice.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or string name (e.g., "INFO").
    log_file : str, optional
        Optional path to a log file for teeing log output.
    trace_mode : bool, default False
        When true, log at DEBUG with timestamps and logger names.

    Returns
    -------
    logging.Logger
        The configured package logger.

    """
    level = resolve_log_level(log_level, trace_mode)

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(level)
    package_logger.propagate = False
    for handler in list(package_logger.handlers):
        if getattr(handler, _HANDLER_MARKER, False):
            package_logger.removeHandler(handler)
            handler.close()

    if trace_mode:
        formatter = logging.Formatter(TRACE_FORMAT, datefmt=TRACE_DATE_FORMAT)
    else:
        formatter = logging.Formatter(PLAIN_FORMAT)

    _install(package_logger, logging.StreamHandler(sys.stderr), level, formatter)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            package_logger.warning("Could not create log file %s: %s", log_file, exc)
        else:
            _install(package_logger, file_handler, level, formatter)
            package_logger.info("Logging to file: %s", log_file)

    return package_logger
