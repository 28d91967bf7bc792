"""
Transient UI feedback: one auto-expiring notification and a busy flag.

The notification slot owns its timer. Every ``notify`` cancels the previous
timer and bumps a generation counter, so a superseded timer can never clear
a newer message even if its callback was already queued. Expiry is also
checked against the clock on read, which is what keeps the slot correct when
no event loop is running between calls (the Streamlit case).
"""
from __future__ import annotations

import asyncio
from datetime import timedelta
from typing import Awaitable, Callable, Optional, TypeVar, Union

from ..domain.models import Notification, Severity
from ..infra.common import Clock, get_clock
from ..infra.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

DEFAULT_DURATION_SECONDS = 4.0
REFRESHED_MESSAGE = "Suggestions refreshed"


class Feedback:
    def __init__(self, duration_seconds: float = DEFAULT_DURATION_SECONDS, clock: Optional[Clock] = None):
        self.duration = timedelta(seconds=duration_seconds)
        self._clock = clock
        self._current: Optional[Notification] = None
        self._timer: Optional[asyncio.TimerHandle] = None
        self._generation = 0
        self.busy = False

    @property
    def clock(self) -> Clock:
        return self._clock or get_clock()

    # ------------------------------------------------------------------
    # notification slot
    # ------------------------------------------------------------------

    def notify(self, message: str, severity: Union[Severity, str] = Severity.SUCCESS) -> Notification:
        """Show ``message``, replacing whatever is shown, and restart the timer."""
        self._cancel_timer()
        self._generation += 1
        notification = Notification(
            message=message,
            severity=Severity(severity),
            expires_at=self.clock.now() + self.duration,
        )
        self._current = notification
        self._schedule_expiry(self._generation)
        log = logger.warning if notification.severity == Severity.ERROR else logger.info
        log(f"notify[{notification.severity.value}]: {message}")
        return notification

    @property
    def current(self) -> Optional[Notification]:
        n = self._current
        if n is not None and n.is_expired(self.clock.now()):
            self._current = None
            self._cancel_timer()
            return None
        return n

    def clear(self) -> None:
        self._cancel_timer()
        self._generation += 1
        self._current = None

    def _schedule_expiry(self, generation: int) -> None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            return
        self._timer = loop.call_later(self.duration.total_seconds(), self._expire, generation)

    def _expire(self, generation: int) -> None:
        if generation != self._generation:
            return
        self._timer = None
        self._current = None

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    # ------------------------------------------------------------------
    # loading
    # ------------------------------------------------------------------

    async def with_loading(
        self,
        operation: Callable[[], Awaitable[T]],
        done_message: str = REFRESHED_MESSAGE,
    ) -> T:
        """Run ``operation`` with ``busy`` set, then confirm with an info message.

        The flag is cleared and the message shown whatever the outcome.
        """
        self.busy = True
        try:
            return await operation()
        finally:
            self.busy = False
            self.notify(done_message, Severity.INFO)
