"""
Infrastructure layer.

- common: clock and timestamp helpers
- exceptions: error taxonomy
- logging: logger configuration
"""

from .common import (
    Clock,
    MockClock,
    SystemClock,
    format_iso,
    get_clock,
    parse_iso,
    set_clock,
)
from .exceptions import (
    APIError,
    ConfigError,
    NetworkError,
    NotAuthenticatedError,
    PermissionDeniedError,
    PortalException,
    ValidationError,
    handle_async_errors,
)
from .logging import LoggerManager, get_logger, set_log_level

__all__ = [
    "Clock",
    "MockClock",
    "SystemClock",
    "format_iso",
    "get_clock",
    "parse_iso",
    "set_clock",
    "APIError",
    "ConfigError",
    "NetworkError",
    "NotAuthenticatedError",
    "PermissionDeniedError",
    "PortalException",
    "ValidationError",
    "handle_async_errors",
    "LoggerManager",
    "get_logger",
    "set_log_level",
]
