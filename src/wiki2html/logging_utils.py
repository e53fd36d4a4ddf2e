#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wiki2html/logging_utils.py
"""Logging setup for applications that embed wiki2html.

The library itself only creates module loggers below ``wiki2html``. Soft
failures such as dangling includes or malformed dates are reported there at
WARNING level; :func:`configure_logging` makes them visible.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

PACKAGE_LOGGER_NAME = "wiki2html"

_PLAIN_FORMAT = "%(levelname)s: %(message)s"
_TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
_TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_log_level(log_level: int | str) -> int:
    """Turn a level name such as ``"warning"`` into its number; unknown names give INFO."""
    if isinstance(log_level, int):
        return log_level
    level = logging.getLevelName(str(log_level).upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Configure root logging handlers for wiki2html output.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or level name (e.g., ``"WARNING"``)
    log_file : str, optional
        Additional file that receives the same records
    trace_mode : bool, default False
        Prefix records with time and logger name, e.g. to see which
        transformation pass reported a problem

    Returns
    -------
    logging.Logger
        The configured root logger

    """
    level = resolve_log_level(log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()
    logging.getLogger(PACKAGE_LOGGER_NAME).setLevel(level)

    if trace_mode:
        formatter = logging.Formatter(_TRACE_FORMAT, datefmt=_TRACE_DATE_FORMAT)
    else:
        formatter = logging.Formatter(_PLAIN_FORMAT)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        try:
            handlers.append(logging.FileHandler(log_file, mode="a", encoding="utf-8"))
        except OSError as exc:
            root_logger.warning("Could not create log file %s: %s", log_file, exc)
            log_file = None

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    if log_file:
        root_logger.info("Logging to file: %s", log_file)
    return root_logger
