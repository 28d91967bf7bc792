"""
Status workflow rules.

The backend owns status; these rules only decide which transitions the
client offers.
"""
from __future__ import annotations

from typing import Any, Dict, Tuple

from .models import Status

# order matters: it is the order actions are shown in
TRANSITIONS: Dict[Status, Tuple[Status, ...]] = {
    Status.PENDING: (Status.IN_PROGRESS, Status.RESOLVED, Status.INVALID),
    Status.IN_PROGRESS: (Status.RESOLVED, Status.INVALID),
    Status.RESOLVED: (),
    Status.INVALID: (),
}

TERMINAL_STATUSES = frozenset(s for s, nxt in TRANSITIONS.items() if not nxt)


def _as_status(value: Any):
    try:
        return Status(getattr(value, "value", value))
    except ValueError:
        return None


def next_statuses(current: Any) -> Tuple[Status, ...]:
    """Forward transitions offered from ``current``; none for unknown statuses."""
    status = _as_status(current)
    if status is None:
        return ()
    return TRANSITIONS[status]


def is_terminal(current: Any) -> bool:
    return _as_status(current) in TERMINAL_STATUSES


def can_transition(current: Any, target: Any) -> bool:
    target_status = _as_status(target)
    return target_status is not None and target_status in next_statuses(current)
