"""
Infrastructure layer - shared primitives.

- clock: one source of "now" so timers and tests agree on time
- ISO-8601 parsing for the timestamps the backend returns
"""
from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone
from typing import Any, Optional


# =============================================================================
# Clock
# =============================================================================


class Clock(ABC):
    """Time source abstraction."""

    @abstractmethod
    def now(self) -> datetime:
        """Current time, timezone-aware UTC."""
        ...


class SystemClock(Clock):

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class MockClock(Clock):
    """Clock for tests; only moves when told to."""

    def __init__(self, fixed_time: Optional[datetime] = None):
        self._fixed_time = fixed_time or datetime(2024, 1, 1, tzinfo=timezone.utc)
        self._offset = timedelta()

    def now(self) -> datetime:
        return self._fixed_time + self._offset

    def advance(self, delta: timedelta) -> None:
        self._offset += delta


_clock_instance: Clock = SystemClock()
_clock_lock = threading.Lock()


def get_clock() -> Clock:
    return _clock_instance


def set_clock(clock: Clock) -> None:
    """Swap the process clock (tests)."""
    global _clock_instance
    with _clock_lock:
        _clock_instance = clock


# =============================================================================
# ISO timestamps
# =============================================================================


def parse_iso(val: Any) -> Optional[datetime]:
    """Parse an ISO-8601 string; naive values are taken as UTC.

    Returns None for empty or unparseable input.
    """
    if val is None or val == "":
        return None
    if isinstance(val, datetime):
        dt = val
    else:
        try:
            dt = datetime.fromisoformat(str(val).replace("Z", "+00:00"))
        except ValueError:
            return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def format_iso(dt: Optional[datetime]) -> str:
    if dt is None:
        return ""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.isoformat().replace("+00:00", "Z")
