"""
Adapters: concrete implementations of the ports.
"""

from .http_backend import AiohttpBackend

__all__ = ["AiohttpBackend"]
