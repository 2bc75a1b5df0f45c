"""Package logger for intseq.

Operations only log at DEBUG, and only on failure paths, so the logger is
silent at the default level. Raise verbosity with ``INTSEQ_LOG_LEVEL=DEBUG``.
"""

import logging
import sys
from typing import TextIO

from intseq.config import settings

__all__ = ["LOG_FORMAT", "DATE_FORMAT", "logger", "setup_logger"]

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _build_handler(stream: TextIO, format_string: str) -> logging.Handler:
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(fmt=format_string, datefmt=DATE_FORMAT))
    return handler


def setup_logger(
    name: str = "intseq",
    level: str | None = None,
    format_string: str = LOG_FORMAT,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Return the named logger, attaching a stream handler on first use.

    A logger that already has handlers is returned as is, so repeated calls
    never stack handlers or override a level set by the application.

    Args:
        name: Logger name, ``"intseq"`` or a child of it.
        level: Level name. Defaults to ``settings.LOG_LEVEL``.
        format_string: Record format for the attached handler.
        stream: Output stream. Defaults to ``sys.stdout``.

    Returns:
        The configured logger.
    """
    log = logging.getLogger(name)
    if log.handlers:
        return log

    log.addHandler(_build_handler(stream or sys.stdout, format_string))
    log.setLevel(logging.getLevelName((level or settings.LOG_LEVEL).upper()))
    log.propagate = False
    return log


logger = setup_logger()
