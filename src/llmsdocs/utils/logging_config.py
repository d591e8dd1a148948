"""Logging configuration for llmsdocs.

MCP stdio servers own stdout for protocol frames, so every record goes to
stderr. Structured context passed through ``extra={...}`` is appended to the
message as ``key=value`` pairs.
"""

from __future__ import annotations

import logging
import sys

from llmsdocs.config import LLMSDOCS_LOG_LEVEL

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_ROOT_LOGGER = "llmsdocs"

# Attributes every LogRecord carries; anything else came in through ``extra``.
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None)).keys()
) | {"message", "asctime", "taskName"}


class ExtraFieldsFormatter(logging.Formatter):
    """Formatter that renders ``extra`` fields after the message."""

    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        extras = {
            key: value for key, value in vars(record).items() if key not in _RESERVED_ATTRS
        }
        if not extras:
            return base
        rendered = " ".join(f"{key}={value!r}" for key, value in sorted(extras.items()))
        return f"{base} | {rendered}"


def configure_logging(level: str | int | None = None, *, stream=None) -> None:
    """Attach a stderr handler to the package loggers.

    Safe to call more than once; the handler is replaced, not duplicated.
    """
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(ExtraFieldsFormatter(_LOG_FORMAT))

    for name in (_ROOT_LOGGER, "server"):
        logger = logging.getLogger(name)
        for existing in list(logger.handlers):
            logger.removeHandler(existing)
        logger.addHandler(handler)
        logger.setLevel(level or LLMSDOCS_LOG_LEVEL.upper())
        logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Return a module logger."""
    return logging.getLogger(name)
