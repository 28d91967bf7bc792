"""
Backend port: the suggestion portal REST API as the client sees it.

Implementations return decoded JSON and raise
- ``APIError`` for non-2xx answers (``server_message`` = the ``error`` field),
- ``NetworkError`` for transport failures and unreadable bodies.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict


class BackendAPI(ABC):
    """Abstract portal backend."""

    @abstractmethod
    async def exchange_token(self, token: str) -> Dict[str, Any]:
        """POST /api/auth/google -> {email, isAdmin, isPrincipal, department}"""
        ...

    @abstractmethod
    async def list_admin_suggestions(self, email: str) -> Any:
        """GET /api/admin/suggestions?email="""
        ...

    @abstractmethod
    async def list_student_suggestions(self, email: str) -> Any:
        """GET /api/student/suggestions?email="""
        ...

    @abstractmethod
    async def create_suggestion(self, payload: Dict[str, str]) -> Any:
        """POST /api/suggestions"""
        ...

    @abstractmethod
    async def delete_suggestion(self, suggestion_id: str) -> Any:
        """DELETE /api/student/suggestions/:id"""
        ...

    @abstractmethod
    async def update_status(self, suggestion_id: str, status: str, updated_by: str) -> Dict[str, Any]:
        """PATCH /api/admin/suggestions/:id"""
        ...

    @abstractmethod
    async def view_admin_suggestion(self, suggestion_id: str) -> Dict[str, Any]:
        """GET /api/admin/suggestions/view/:id"""
        ...

    @abstractmethod
    async def view_student_suggestion(self, suggestion_id: str, email: str) -> Dict[str, Any]:
        """GET /api/student/suggestions/view/:id?email="""
        ...
