"""Logging setup for the md2typ command-line tool."""

from __future__ import annotations

import logging
import sys
from typing import Optional

PLAIN_FORMAT = "%(levelname)s: %(message)s"
TRACE_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
TRACE_DATE_FORMAT = "%H:%M:%S"


def _resolve_level(log_level: int | str) -> int:
    if isinstance(log_level, int):
        return log_level
    level = logging.getLevelName(str(log_level).upper())
    return level if isinstance(level, int) else logging.WARNING


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Route md2typ log records to stderr and, optionally, a file.

    Any handlers already on the root logger are replaced, so calling this
    twice does not duplicate output.

    Parameters
    ----------
    log_level : int | str
        Level number or name such as "DEBUG"; unknown names fall back to WARNING
    log_file : str, optional
        File that receives a copy of every record (appended, UTF-8)
    trace_mode : bool, default False
        Prefix records with a timestamp and the logger name, which shows
        which stage (parser, renderer, templates) emitted them

    Returns
    -------
    logging.Logger
        The root logger

    """
    level = _resolve_level(log_level)
    formatter = (
        logging.Formatter(TRACE_FORMAT, datefmt=TRACE_DATE_FORMAT) if trace_mode else logging.Formatter(PLAIN_FORMAT)
    )

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    file_error: OSError | None = None
    if log_file:
        try:
            handlers.append(logging.FileHandler(log_file, mode="a", encoding="utf-8"))
        except OSError as e:
            file_error = e

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(level)
    for handler in handlers:
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    if file_error is not None:
        root_logger.warning(f"Cannot write log file {log_file}: {file_error}")

    return root_logger
