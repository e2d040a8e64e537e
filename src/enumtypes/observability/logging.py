"""
Logging — Structured logging tagged with the domain being built.

Library code only emits DEBUG records; handlers are installed by the
host program through configure_logging().
"""

import logging
import json
import sys
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any


# Label of the domain currently under construction
_domain_label: ContextVar[str | None] = ContextVar("domain_label", default=None)


def set_domain_label(label: str | None) -> None:
    """Set domain label for current context."""
    _domain_label.set(label or None)


def get_domain_label() -> str | None:
    """Get domain label from current context."""
    return _domain_label.get()


class DomainFilter(logging.Filter):
    """Adds domain to log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.domain = get_domain_label() or "-"
        return True


class JSONFormatter(logging.Formatter):
    """
    Formats log records as JSON for structured logging.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "domain": getattr(record, "domain", None),
        }

        if hasattr(record, "extra_data"):
            log_data.update(record.extra_data)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data)


class ReadableFormatter(logging.Formatter):
    """
    Human-readable formatter for development.
    """

    def format(self, record: logging.LogRecord) -> str:
        domain = getattr(record, "domain", "-")

        base = f"{record.levelname:<7} [{domain}] {record.name}: {record.getMessage()}"

        if record.exc_info:
            base += "\n" + self.formatException(record.exc_info)

        return base


def configure_logging(
    level: int = logging.INFO,
    json_format: bool = False,
    stream: Any = None,
) -> None:
    """
    Configure enumtypes logging.

    Args:
        level: Logging level
        json_format: Use JSON format
        stream: Output stream (default: stderr)
    """
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.addFilter(DomainFilter())

    if json_format:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(ReadableFormatter())

    package_logger = logging.getLogger("enumtypes")
    package_logger.setLevel(level)
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Get a logger for an enumtypes component."""
    return logging.getLogger(f"enumtypes.{name}")


class LogContext:
    """
    Context manager that labels log records with a domain.

    Usage:
        with LogContext("Enum(RED, GREEN)"):
            logger.debug("Building...")  # Includes domain label
    """

    def __init__(self, label: str | None):
        self.label = label
        self._token = None

    def __enter__(self):
        self._token = _domain_label.set(self.label or None)
        return self

    def __exit__(self, *args):
        if self._token is not None:
            _domain_label.reset(self._token)
