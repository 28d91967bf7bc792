from __future__ import annotations

from dataclasses import dataclass

from suggestion_portal.app.board import BoardController


@dataclass(frozen=True)
class UserContext:
    email: str
    role: str  # "student" | "hod" | "principal"
    department: str


def get_user_context(board: BoardController) -> UserContext:
    s = board.session
    return UserContext(email=s.email, role=s.role.name, department=s.department)


def is_admin(board: BoardController) -> bool:
    return board.profile.can_change_status
