"""
Role capability profiles.

The board never branches on ``is_admin`` itself; it asks the profile of the
current session what to call and what to offer.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Tuple

from ..domain.models import Session, Suggestion
from ..domain.rules import next_statuses
from ..infra.exceptions import PermissionDeniedError
from ..ports.backend import BackendAPI

ACTION_VIEW = "view"
ACTION_DELETE = "delete"

PRINCIPAL_LABEL = "Principal"
HOD_LABEL = "HOD"


class RoleProfile(ABC):
    name: str = ""
    can_create: bool = False
    can_delete: bool = False
    can_change_status: bool = False

    @abstractmethod
    async def load(self, backend: BackendAPI, session: Session) -> Any:
        """Fetch the list scoped to this role."""
        ...

    @abstractmethod
    async def view(self, backend: BackendAPI, session: Session, suggestion_id: str) -> Dict[str, Any]:
        ...

    async def mutate(self, backend: BackendAPI, session: Session, suggestion_id: str, status: str) -> Dict[str, Any]:
        """Send a status change; only admins may."""
        raise PermissionDeniedError("Only administrators can change status", action="change_status", role=self.name)

    @abstractmethod
    def dashboard_title(self, session: Session) -> str:
        ...

    def row_actions(self, suggestion: Suggestion) -> Tuple[str, ...]:
        actions = [ACTION_VIEW]
        if self.can_change_status:
            actions.extend(s.value for s in next_statuses(suggestion.status))
        if self.can_delete:
            actions.append(ACTION_DELETE)
        return tuple(actions)


class StudentProfile(RoleProfile):
    name = "student"
    can_create = True
    can_delete = True

    async def load(self, backend: BackendAPI, session: Session) -> Any:
        return await backend.list_student_suggestions(session.email)

    async def view(self, backend: BackendAPI, session: Session, suggestion_id: str) -> Dict[str, Any]:
        return await backend.view_student_suggestion(suggestion_id, session.email)

    def dashboard_title(self, session: Session) -> str:
        return "Student Dashboard"


class AdminProfile(RoleProfile):
    """HOD or principal. Scope is decided server-side from the email."""
    name = "admin"
    can_change_status = True

    async def load(self, backend: BackendAPI, session: Session) -> Any:
        return await backend.list_admin_suggestions(session.email)

    async def view(self, backend: BackendAPI, session: Session, suggestion_id: str) -> Dict[str, Any]:
        return await backend.view_admin_suggestion(suggestion_id)

    async def mutate(self, backend: BackendAPI, session: Session, suggestion_id: str, status: str) -> Dict[str, Any]:
        return await backend.update_status(suggestion_id, status, self.updated_by(session))

    @staticmethod
    def updated_by(session: Session) -> str:
        return PRINCIPAL_LABEL if session.role.is_principal else HOD_LABEL

    def dashboard_title(self, session: Session) -> str:
        if session.role.is_principal:
            return "Principal Dashboard"
        return f"{session.department or 'Admin'} Dashboard"


STUDENT = StudentProfile()
ADMIN = AdminProfile()


def profile_for(session: Session) -> RoleProfile:
    # is_principal without is_admin grants nothing extra
    return ADMIN if session.role.is_admin else STUDENT
