# -*- coding: utf-8 -*-
"""Logging utilities."""
import logging
import os
import sys
from typing import Optional

from zksudoku.common.constants import LOG_LEVEL_ENV_VAR

_FORMAT = "%(levelname)s %(asctime)s %(filename)s:%(lineno)d] %(message)s"
_DATE_FORMAT = "%m-%d %H:%M:%S"

_handler: Optional[logging.Handler] = None
# set by `set_log_level`, takes precedence over the environment variable
_level: Optional[str] = None


class NewLineFormatter(logging.Formatter):
    """Indent continuation lines so multi-line messages stay aligned with their prefix."""

    def format(self, record):
        msg = super().format(record)
        if record.message != "":
            parts = msg.split(record.message)
            msg = msg.replace("\n", "\r\n" + parts[0])
        return msg


def _default_handler() -> logging.Handler:
    global _handler
    if _handler is None:
        _handler = logging.StreamHandler(sys.stderr)
        _handler.setFormatter(NewLineFormatter(_FORMAT, datefmt=_DATE_FORMAT))
    return _handler


def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """Get a logger with the package formatter.

    Args:
        name (str): The logger name, usually `__name__`.
        level (Optional[str]): The log level. Defaults to the level set by
            `set_log_level`, then the `ZKSUDOKU_LOG_LEVEL` environment variable,
            then `INFO`.
    """
    logger = logging.getLogger(name)
    if level is None:
        level = _level or os.environ.get(LOG_LEVEL_ENV_VAR, "INFO")
    logger.setLevel(level.upper())
    handler = _default_handler()
    if handler not in logger.handlers:
        logger.addHandler(handler)
    logger.propagate = False
    return logger


def set_log_level(level: str) -> None:
    """Apply `level` to every logger created by `get_logger`, and to later ones."""
    global _level
    level = level.upper()
    _level = level
    for logger in logging.Logger.manager.loggerDict.values():
        if isinstance(logger, logging.Logger) and _handler in logger.handlers:
            logger.setLevel(level)
