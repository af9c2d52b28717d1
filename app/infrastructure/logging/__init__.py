"""Structured logging infrastructure.

Public API:
    - configure_logging(): Initialize logging for the application
    - get_module_logger(): Get a logger for the calling module
    - bind_request_context(): Context manager for request-scoped logging
    - get_correlation_id(): Get current correlation ID from context
"""

from infrastructure.logging.setup import (
    configure_logging,
    get_module_logger,
    logger,
)
from infrastructure.logging.context import (
    bind_request_context,
    get_correlation_id,
)

__all__ = [
    "configure_logging",
    "get_module_logger",
    "logger",
    "bind_request_context",
    "get_correlation_id",
]
