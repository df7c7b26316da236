"""
Structured JSON Logging

Provides structured logging with JSON output for production environments.
"""

import json
import logging
import sys

from contextvars import ContextVar
from typing import Any

# Set per request by RequestIDMiddleware; "-" outside a request
request_id_var: ContextVar[str] = ContextVar("request_id", default="-")

# LogRecord attributes that are not user-supplied extra fields
_RESERVED_ATTRS = frozenset(
    {
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
        "exc_info",
        "exc_text",
        "stack_info",
    }
)


class RequestIdFilter(logging.Filter):
    """Stamp every record with the current request id"""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "request_id"):
            record.request_id = request_id_var.get()
        return True


class JsonFormatter(logging.Formatter):
    """JSON formatter for structured logging output"""

    def format(self, record: logging.LogRecord) -> str:
        """
        Format log record as JSON

        Args:
            record: Python logging record

        Returns:
            JSON-formatted log string
        """
        base = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            base["exception"] = self.formatException(record.exc_info)

        # Extra fields from logger.info("msg", extra={...}) or a LoggerAdapter
        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS:
                base[key] = value

        return json.dumps(base, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", format_json: bool = True) -> None:
    """
    Setup structured logging for the chart service

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: Whether to use JSON formatting
    """
    root = logging.getLogger()
    root.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(RequestIdFilter())

    if format_json:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - [%(request_id)s] %(message)s")
        )

    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))


def get_logger(name: str, extra_fields: dict[str, Any] | None = None) -> logging.Logger:
    """
    Get logger with optional extra fields

    Args:
        name: Logger name (usually __name__)
        extra_fields: Additional fields to include in all log messages

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if extra_fields:
        return logging.LoggerAdapter(logger, extra_fields)

    return logger


def get_api_logger(endpoint: str) -> logging.Logger:
    """Get logger for API endpoints"""
    return get_logger(f"xuankong.api.{endpoint}", {"layer": "api", "type": "endpoint"})
