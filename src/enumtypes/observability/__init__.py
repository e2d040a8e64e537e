"""
Observability — Logging for enumerated type construction.
"""

from enumtypes.observability.logging import (
    set_domain_label,
    get_domain_label,
    configure_logging,
    get_logger,
    LogContext,
    DomainFilter,
    JSONFormatter,
    ReadableFormatter,
)

__all__ = [
    "set_domain_label",
    "get_domain_label",
    "configure_logging",
    "get_logger",
    "LogContext",
    "DomainFilter",
    "JSONFormatter",
    "ReadableFormatter",
]
