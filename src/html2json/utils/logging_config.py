"""Logging setup shared by the library and the CLI."""

from __future__ import annotations

import logging
import sys

from html2json.config import HTML2JSON_LOG_LEVEL

_PACKAGE_LOGGER = "html2json"
_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

_handler: logging.Handler | None = None


def get_logger(name: str) -> logging.Logger:
    """Return a module logger under the package namespace."""
    return logging.getLogger(name)


def configure_logging(*, verbose: bool = False, level: str | None = None) -> None:
    """Attach a stderr handler to the package logger, replacing one from an earlier call."""
    global _handler

    logger = logging.getLogger(_PACKAGE_LOGGER)
    if _handler is not None:
        logger.removeHandler(_handler)

    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    logger.addHandler(_handler)

    if verbose:
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel((level or HTML2JSON_LOG_LEVEL).upper())
