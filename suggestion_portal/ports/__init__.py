"""
Ports: abstract boundaries the application layer depends on.
"""

from .backend import BackendAPI

__all__ = ["BackendAPI"]
