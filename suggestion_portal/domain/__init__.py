"""
Domain layer: suggestion records, session identity, workflow rules and the
view filter pipeline. No IO.
"""

from .filters import apply_filters
from .models import (
    ALL,
    Category,
    FilterControls,
    Notification,
    Role,
    Session,
    Severity,
    SortOrder,
    Status,
    Suggestion,
    SuggestionDraft,
)
from .rules import TERMINAL_STATUSES, TRANSITIONS, can_transition, is_terminal, next_statuses

__all__ = [
    "ALL",
    "Category",
    "FilterControls",
    "Notification",
    "Role",
    "Session",
    "Severity",
    "SortOrder",
    "Status",
    "Suggestion",
    "SuggestionDraft",
    "TERMINAL_STATUSES",
    "TRANSITIONS",
    "apply_filters",
    "can_transition",
    "is_terminal",
    "next_statuses",
]
