"""
Infrastructure layer - exceptions.

Failures the client can hit, split the way the board reports them:
transport problems, application errors returned by the backend,
client-side validation and role gates.
"""

from functools import wraps
from typing import Any, Dict, Optional


class PortalException(Exception):
    """Base class for every portal client error."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code or "UNKNOWN_ERROR"
        self.details = details or {}


class ConfigError(PortalException):
    """Invalid or missing configuration."""
    def __init__(self, message: str, config_key: Optional[str] = None, **kwargs) -> None:
        super().__init__(message, "CONFIG_ERROR", {"config_key": config_key, **kwargs})


class ValidationError(PortalException):
    """Input rejected before anything is sent to the backend."""
    def __init__(self, message: str, field: Optional[str] = None, value: Any = None, **kwargs) -> None:
        super().__init__(message, "VALIDATION_ERROR", {"field": field, "value": value, **kwargs})


class NetworkError(PortalException):
    """Connection failure, timeout or an unreadable response body."""
    def __init__(self, message: str, url: Optional[str] = None, status_code: Optional[int] = None, **kwargs) -> None:
        super().__init__(message, "NETWORK_ERROR", {"url": url, "status_code": status_code, **kwargs})


class APIError(PortalException):
    """Non-2xx answer from the backend.

    ``server_message`` carries the ``error`` field of the JSON body when the
    backend sent one; it is shown to the user verbatim.
    """
    def __init__(
        self,
        message: str,
        api_name: Optional[str] = None,
        status_code: Optional[int] = None,
        server_message: Optional[str] = None,
        **kwargs
    ) -> None:
        super().__init__(message, "API_ERROR", {"api_name": api_name, "status_code": status_code, **kwargs})
        self.status_code = status_code
        self.server_message = server_message


class PermissionDeniedError(PortalException):
    """Action not offered to the current role."""
    def __init__(self, message: str, action: Optional[str] = None, role: Optional[str] = None, **kwargs) -> None:
        super().__init__(message, "PERMISSION_DENIED", {"action": action, "role": role, **kwargs})


class NotAuthenticatedError(PortalException):
    """Identity-bearing call attempted without a session."""
    def __init__(self, message: str = "Not logged in", **kwargs) -> None:
        super().__init__(message, "NOT_AUTHENTICATED", kwargs)


def handle_async_errors(logger=None):
    """
    Log and re-raise portal errors; wrap anything else in ``NetworkError``.

    Used at the network boundary so callers only ever see ``PortalException``.
    """
    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            _logger = logger
            if _logger is None:
                from .logging import get_logger
                _logger = get_logger(__name__)
            try:
                return await func(*args, **kwargs)
            except PortalException as e:
                _logger.warning(f"{func.__name__} failed [{e.error_code}]: {e.message}")
                raise
            except Exception as e:
                _logger.error(f"{func.__name__} raised unexpectedly: {e}", exc_info=True)
                raise NetworkError(f"Unexpected error: {e}") from e
        return wrapper
    return decorator
