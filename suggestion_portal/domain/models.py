"""
Domain models: plain data, no IO.

Wire strings from the backend are kept as ``str``-backed enums so that a
record compares equal to the raw status/category string it came from.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional, Union

from ..infra.common import format_iso, parse_iso
from ..infra.exceptions import APIError, ValidationError

ALL = "all"
PREVIEW_CHARS = 50


# =============================================================================
# Enumerations
# =============================================================================


class Category(str, Enum):
    ACADEMICS = "academics"
    FACILITIES = "facilities"
    STUDENT_LIFE = "student-life"
    TECHNOLOGY = "technology"
    SAFETY = "safety"
    ADMINISTRATION = "administration"
    OTHER = "other"

    @property
    def label(self) -> str:
        return self.value.replace("-", " ").title()


class Status(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    RESOLVED = "resolved"
    INVALID = "invalid"

    @property
    def label(self) -> str:
        return self.value.replace("-", " ").title()


class SortOrder(str, Enum):
    NEWEST = "newest"
    OLDEST = "oldest"


class Severity(str, Enum):
    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"


def coerce_category(value: Any) -> Union[Category, str]:
    """Known values become ``Category``; anything else is kept verbatim."""
    try:
        return Category(value)
    except ValueError:
        return str(value or "")


def coerce_status(value: Any) -> Union[Status, str]:
    try:
        return Status(value)
    except ValueError:
        return str(value or "")


# =============================================================================
# Session
# =============================================================================


@dataclass(frozen=True)
class Role:
    is_admin: bool = False
    is_principal: bool = False

    @property
    def name(self) -> str:
        if not self.is_admin:
            return "student"
        return "principal" if self.is_principal else "hod"


@dataclass(frozen=True)
class Session:
    """Who is logged in. Replaced as a whole, never edited in place."""
    email: str = ""
    role: Role = field(default_factory=Role)
    department: str = ""
    authenticated: bool = False

    @classmethod
    def anonymous(cls) -> "Session":
        return cls()

    @classmethod
    def from_auth_payload(cls, payload: Dict[str, Any]) -> "Session":
        email = str(payload.get("email") or "").strip()
        if not email:
            raise APIError("Login response carried no email", api_name="auth")
        return cls(
            email=email,
            role=Role(
                is_admin=bool(payload.get("isAdmin") or False),
                is_principal=bool(payload.get("isPrincipal") or False),
            ),
            department=str(payload.get("department") or ""),
            authenticated=True,
        )


# =============================================================================
# Suggestion
# =============================================================================


@dataclass(frozen=True)
class Suggestion:
    id: str
    title: str = ""
    description: str = ""
    category: Union[Category, str] = Category.OTHER
    status: Union[Status, str] = Status.PENDING
    email: str = ""
    department: str = ""
    updated_by: str = ""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Suggestion":
        raw_id = d.get("_id", d.get("id"))
        if raw_id is None or str(raw_id) == "":
            raise ValidationError("Suggestion record has no id", field="_id")
        return cls(
            id=str(raw_id),
            title=str(d.get("title") or ""),
            description=str(d.get("description") or ""),
            category=coerce_category(d.get("category")),
            status=coerce_status(d.get("status")),
            email=str(d.get("email") or ""),
            department=str(d.get("department") or ""),
            updated_by=str(d.get("updatedBy") or ""),
            created_at=parse_iso(d.get("createdAt")),
            updated_at=parse_iso(d.get("updatedAt")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "_id": self.id,
            "title": self.title,
            "description": self.description,
            "category": str(getattr(self.category, "value", self.category)),
            "status": str(getattr(self.status, "value", self.status)),
            "email": self.email,
            "department": self.department,
            "updatedBy": self.updated_by,
            "createdAt": format_iso(self.created_at),
            "updatedAt": format_iso(self.updated_at),
        }

    @property
    def status_value(self) -> str:
        return str(getattr(self.status, "value", self.status))

    @property
    def category_value(self) -> str:
        return str(getattr(self.category, "value", self.category))

    @property
    def description_preview(self) -> str:
        text = self.description or ""
        return text[:PREVIEW_CHARS] + ("..." if len(text) > PREVIEW_CHARS else "")

    @property
    def status_label(self) -> str:
        if self.updated_by:
            return f"{self.status_value} ({self.updated_by})"
        return self.status_value


@dataclass(frozen=True)
class SuggestionDraft:
    """Fields a student fills in to submit a suggestion."""
    category: str = ""
    title: str = ""
    description: str = ""

    @classmethod
    def from_fields(cls, fields: Dict[str, Any]) -> "SuggestionDraft":
        return cls(
            category=str(fields.get("category") or "").strip(),
            title=str(fields.get("title") or "").strip(),
            description=str(fields.get("description") or "").strip(),
        )

    def validate(self) -> None:
        if self.category not in {c.value for c in Category}:
            raise ValidationError("Please select a category", field="category", value=self.category)
        if not self.title:
            raise ValidationError("Title is required", field="title")
        if not self.description:
            raise ValidationError("Description is required", field="description")

    def to_payload(self, email: str) -> Dict[str, str]:
        return {
            "email": email,
            "category": self.category,
            "title": self.title,
            "description": self.description,
        }


# =============================================================================
# View state
# =============================================================================


@dataclass(frozen=True)
class FilterControls:
    status_filter: str = ALL
    category_filter: str = ALL
    search_term: str = ""
    sort_order: SortOrder = SortOrder.NEWEST

    def update(self, **changes: Any) -> "FilterControls":
        if "sort_order" in changes:
            changes["sort_order"] = SortOrder(changes["sort_order"])
        return replace(self, **changes)


@dataclass(frozen=True)
class Notification:
    message: str
    severity: Severity
    expires_at: datetime

    def is_expired(self, now: datetime) -> bool:
        return now >= self.expires_at
