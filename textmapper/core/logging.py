"""
Structured logging configuration.

Two output formats:
  - **json**    : one JSON object per line, for log shippers.
  - **console** : pipe-separated text, for local runs and tests.

Usage:
    from textmapper.core.logging import setup_logging, get_logger

    setup_logging(level="DEBUG", log_format="console")
    logger = get_logger(__name__)
    logger.debug("Batch mapped", extra={"stream_id": "FooStream", "published": 1})
"""

import logging
import sys
from contextvars import ContextVar
from typing import Literal

from pythonjsonlogger import json as json_logger

LOG_FORMAT_CONSOLE = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Loggers owned by the HTTP stack; kept at WARNING so mapper debug output stays readable
_NOISY_LOGGERS = ("uvicorn.access", "httpx", "httpcore", "asyncio")

# Set by the API middleware for the duration of one request
request_id_var: ContextVar[str | None] = ContextVar("request_id", default=None)


def setup_logging(
    level: str = "INFO",
    log_format: Literal["json", "console"] = "json",
) -> None:
    """
    Configure the root logger once for the whole process.

    Args:
        level:      Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: 'json' for structured lines, 'console' for human-readable.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level.upper())
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level.upper())
    handler.addFilter(RequestIdFilter())
    if log_format == "json":
        handler.setFormatter(_build_json_formatter())
    else:
        handler.setFormatter(
            logging.Formatter(LOG_FORMAT_CONSOLE, datefmt=LOG_DATE_FORMAT)
        )
    root_logger.addHandler(handler)

    for noisy in _NOISY_LOGGERS:
        logging.getLogger(noisy).setLevel(logging.WARNING)

    root_logger.info(
        "Logging initialised",
        extra={"log_level": level.upper(), "log_format": log_format},
    )


def get_logger(name: str) -> logging.Logger:
    """Return a named logger; call with ``get_logger(__name__)``."""
    return logging.getLogger(name)


class RequestIdFilter(logging.Filter):
    """Copy the current request id (if any) onto every record."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "request_id"):
            record.request_id = request_id_var.get()  # type: ignore[attr-defined]
        return True


# ─── Internal ─────────────────────────────────────────────────────────


def _build_json_formatter() -> json_logger.JsonFormatter:
    return json_logger.JsonFormatter(
        fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt=LOG_DATE_FORMAT,
        rename_fields={
            "asctime": "timestamp",
            "levelname": "level",
            "name": "logger",
        },
    )
