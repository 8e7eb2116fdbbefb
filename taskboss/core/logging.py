import contextlib
import contextvars
import json
import logging
import os
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

from taskboss.core.config import settings

# Per-request logging context (request id, user id, action, ...)
request_context: contextvars.ContextVar[Dict[str, Any]] = contextvars.ContextVar(
    "request_context", default={}
)

SERVICE_NAME = "taskboss"


class JsonFormatter(logging.Formatter):
    """
    Render log records as single-line JSON documents.

    Used in production so logs can be shipped to an aggregator as-is.
    """

    def format(self, record: logging.LogRecord) -> str:
        return json.dumps(self._prepare_log_dict(record), default=str)

    def _prepare_log_dict(self, record: logging.LogRecord) -> Dict[str, Any]:
        record_dict: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "service": SERVICE_NAME,
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            record_dict["exception"] = self.formatException(record.exc_info)

        # Fields passed through `extra=`
        for key in ("path", "method", "client_host", "details"):
            if key in record.__dict__:
                record_dict[key] = record.__dict__[key]

        for key, value in request_context.get().items():
            record_dict.setdefault(key, value)

        return record_dict


class ContextFilter(logging.Filter):
    """Copy the current request context onto every record."""

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in request_context.get().items():
            if not hasattr(record, key):
                setattr(record, key, value)
        return True


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Set up logging for the application.

    Args:
        level: Optional log level override (defaults to settings.LOG_LEVEL)
    """
    log_level = getattr(logging, (level or settings.LOG_LEVEL).upper())

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Clear existing handlers so repeated calls don't duplicate output
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    context_filter = ContextFilter()

    if settings.ENVIRONMENT == "production":
        formatter: logging.Formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(name)s (%(filename)s:%(lineno)d) - %(message)s"
        )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(log_level)
    console_handler.addFilter(context_filter)
    root_logger.addHandler(console_handler)

    if settings.LOG_FILE:
        try:
            log_path = Path(settings.LOG_FILE)
            os.makedirs(log_path.parent, exist_ok=True)

            file_handler = logging.FileHandler(log_path)
            file_handler.setFormatter(formatter)
            file_handler.setLevel(log_level)
            file_handler.addFilter(context_filter)
            root_logger.addHandler(file_handler)
        except OSError as e:
            root_logger.error(f"Error setting up file logging: {e}")

    # Quiet down chatty third-party loggers
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("openai").setLevel(logging.WARNING)

    return logging.getLogger(SERVICE_NAME)


@contextlib.contextmanager
def log_context(**context_data: Any):
    """
    Context manager for adding context to logs.

    Usage:
        with log_context(user_id=123, action="complete_task"):
            logger.info("Task completed")
    """
    current_context = request_context.get().copy()
    current_context.update(context_data)
    token = request_context.set(current_context)
    try:
        yield
    finally:
        request_context.reset(token)
