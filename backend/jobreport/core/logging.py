"""Logging setup: JSON lines in production, coloured console output in development."""

import json
import logging
import sys
import traceback
from datetime import datetime, timezone
from typing import Any

from .config import settings

# Attributes every LogRecord carries; anything else was passed through ``extra``.
_RECORD_ATTRS = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", (), None).__dict__.keys()
) | {"message", "asctime", "taskName"}


class JSONFormatter(logging.Formatter):
    """Render each record as a single JSON object.

    ``extra`` fields passed to the logger end up under the ``extra`` key, so
    search filters and lookup keys stay queryable in the log aggregator.
    """

    def __init__(self, include_extra: bool = True) -> None:
        super().__init__()
        self.include_extra = include_extra

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
            "process": {"id": record.process, "name": record.processName},
            "thread": {"id": record.thread, "name": record.threadName},
        }

        if record.exc_info:
            exc_type, exc_value, _ = record.exc_info
            entry["exception"] = {
                "type": exc_type.__name__ if exc_type else None,
                "message": str(exc_value) if exc_value else None,
                "traceback": traceback.format_exception(*record.exc_info),
            }

        if record.stack_info:
            entry["stack_info"] = record.stack_info

        if self.include_extra:
            extra = {}
            for key, value in record.__dict__.items():
                if key in _RECORD_ATTRS or key.startswith("_"):
                    continue
                try:
                    json.dumps(value)
                except (TypeError, ValueError):
                    value = str(value)
                extra[key] = value
            if extra:
                entry["extra"] = extra

        return json.dumps(entry, default=str)


class ConsoleFormatter(logging.Formatter):
    """Human-readable console formatter with colors for development."""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, self.RESET)
        timestamp = datetime.fromtimestamp(record.created, tz=timezone.utc).strftime(
            "%Y-%m-%d %H:%M:%S"
        )
        line = (
            f"{timestamp} - {color}{record.levelname:8}{self.RESET} - "
            f"{record.name} - {record.getMessage()}"
        )
        if record.exc_info:
            line += "\n" + "".join(traceback.format_exception(*record.exc_info))
        return line


def _pick_formatter() -> logging.Formatter:
    log_format = (settings.log_format or "").lower()
    if log_format == "json":
        return JSONFormatter()
    if log_format == "console":
        return ConsoleFormatter()
    if settings.environment.lower() == "production":
        return JSONFormatter()
    return ConsoleFormatter()


def setup_logging() -> None:
    """Configure the root logger once for the whole process.

    ``LOG_FORMAT=json`` or ``LOG_FORMAT=console`` overrides the
    environment-based choice.
    """
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(_pick_formatter())
    handler.setLevel(log_level)
    root_logger.addHandler(handler)

    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` (usually the caller's ``__name__``).

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("Search executed", extra={"shape": "plain", "rows": 20})
    """
    return logging.getLogger(name)


class LoggerAdapter(logging.LoggerAdapter):
    """Logger adapter that merges fixed context into every record's ``extra``.

    Example:
        >>> logger = LoggerAdapter(get_logger(__name__), {"endpoint": "/search"})
        >>> logger.error("Error parsing page number")
    """

    def process(self, msg: str, kwargs: dict[str, Any]) -> tuple[str, dict[str, Any]]:
        extra = kwargs.get("extra", {})
        extra.update(self.extra)
        kwargs["extra"] = extra
        return msg, kwargs
