"""
Session/Board controller.

Owns the session, the suggestion cache, the detail selection, the filter
controls and the feedback slot. Every user action is a coroutine that talks
to the backend port, applies the result to the cache in one step and leaves
a notification behind. Failures never escape: they become a notification
plus a safe state.

Usage:
    board = BoardController.from_settings(load_settings())
    await board.complete_login(credential)
    board.set_filters(status_filter="pending", search_term="wifi")
    rows = board.visible
"""
from __future__ import annotations

import inspect
from typing import Any, Awaitable, Callable, Dict, List, Optional, Tuple, Union

from ..adapters.http_backend import AiohttpBackend
from ..domain.filters import apply_filters
from ..domain.models import (
    FilterControls,
    Notification,
    Session,
    Severity,
    Status,
    Suggestion,
    SuggestionDraft,
)
from ..domain.rules import can_transition
from ..infra.common import Clock
from ..infra.exceptions import (
    APIError,
    NetworkError,
    NotAuthenticatedError,
    PermissionDeniedError,
    PortalException,
    ValidationError,
)
from ..infra.logging import get_logger
from ..ports.backend import BackendAPI
from .cache import DetailSelection, SuggestionCache
from .capabilities import RoleProfile, profile_for
from .feedback import DEFAULT_DURATION_SECONDS, Feedback

logger = get_logger(__name__)

ConfirmFn = Callable[[], Union[bool, Awaitable[bool]]]

DELETE_CONFIRM_PROMPT = "Are you sure you want to delete this suggestion?"


class BoardController:
    def __init__(
        self,
        backend: BackendAPI,
        *,
        notification_seconds: float = DEFAULT_DURATION_SECONDS,
        clock: Optional[Clock] = None,
    ):
        self.backend = backend
        self.session = Session.anonymous()
        self.cache = SuggestionCache()
        self.selection = DetailSelection()
        self.filters = FilterControls()
        self.feedback = Feedback(notification_seconds, clock)

    @classmethod
    def from_settings(cls, settings) -> "BoardController":
        backend = AiohttpBackend(settings.require_base_url(), timeout=settings.request_timeout)
        return cls(backend, notification_seconds=settings.notification_seconds)

    # ------------------------------------------------------------------
    # read side
    # ------------------------------------------------------------------

    @property
    def profile(self) -> RoleProfile:
        return profile_for(self.session)

    @property
    def visible(self) -> Tuple[Suggestion, ...]:
        """Cache through the filter pipeline, recomputed on every read."""
        return apply_filters(self.cache.records, self.filters)

    @property
    def detail(self) -> Optional[Suggestion]:
        return self.selection.record

    @property
    def notification(self) -> Optional[Notification]:
        return self.feedback.current

    @property
    def busy(self) -> bool:
        return self.feedback.busy

    @property
    def dashboard_title(self) -> str:
        return self.profile.dashboard_title(self.session)

    def row_actions(self, suggestion: Suggestion) -> Tuple[str, ...]:
        return self.profile.row_actions(suggestion)

    def set_filters(self, **changes: Any) -> FilterControls:
        self.filters = self.filters.update(**changes)
        return self.filters

    # ------------------------------------------------------------------
    # helpers
    # ------------------------------------------------------------------

    def _report(
        self,
        error: PortalException,
        fallback: str,
        *,
        network_message: Optional[str] = None,
        use_server_message: bool = True,
    ) -> None:
        if isinstance(error, NetworkError):
            message = network_message or f"{fallback}. Check console."
        elif isinstance(error, APIError):
            message = (error.server_message if use_server_message else None) or fallback
        else:
            message = error.message or fallback
        self.feedback.notify(message, Severity.ERROR)

    def _require_session(self, action: str) -> Session:
        if not self.session.authenticated:
            raise NotAuthenticatedError(f"Please log in to {action}")
        return self.session

    def _stale(self, session: Session, action: str) -> bool:
        """True when the session changed while ``action`` was awaiting the backend."""
        if self.session is session:
            return False
        # logged out (or in as someone else) while the request was in flight
        logger.info(f"Discarding {action} result fetched for {session.email}")
        return True

    @staticmethod
    def _parse_records(data: Any) -> List[Suggestion]:
        if not isinstance(data, list):
            logger.warning(f"List response is {type(data).__name__}, not a list; treating as empty")
            return []
        records = []
        for item in data:
            try:
                records.append(Suggestion.from_dict(item))
            except (ValidationError, AttributeError) as e:
                logger.warning(f"Skipping unreadable suggestion record {item!r}: {e}")
        return records

    @staticmethod
    def _parse_record(data: Any, api_name: str) -> Suggestion:
        if not isinstance(data, dict):
            raise APIError(f"{api_name} returned {type(data).__name__}, expected an object", api_name=api_name)
        return Suggestion.from_dict(data)

    # ------------------------------------------------------------------
    # session
    # ------------------------------------------------------------------

    async def complete_login(self, token: Optional[str]) -> Session:
        """Exchange an identity-provider credential for a session, then load."""
        if not token:
            self.feedback.notify("No credential returned", Severity.ERROR)
            return self.session
        try:
            payload = await self.backend.exchange_token(token)
            if not isinstance(payload, dict):
                raise APIError("Login response is not an object", api_name="login")
            session = Session.from_auth_payload(payload)
        except PortalException as e:
            self._report(e, "Login failed", network_message="Login error. Check console.")
            return self.session

        self.session = session
        self.selection.clear()
        logger.info(f"Logged in as {session.email} ({self.profile.name})")
        self.feedback.notify("Logged in successfully!", Severity.SUCCESS)
        await self.load()
        return self.session

    def logout(self) -> None:
        if self.session.authenticated:
            logger.info(f"Logging out {self.session.email}")
        self.session = Session.anonymous()
        self.cache.clear()
        self.selection.clear()
        self.filters = FilterControls()
        self.feedback.clear()
        self.feedback.busy = False
        self.feedback.notify("Logged out successfully", Severity.INFO)

    # ------------------------------------------------------------------
    # collection
    # ------------------------------------------------------------------

    async def load(self) -> bool:
        """Replace the cache with the role-scoped list. Silent on success."""
        if not self.session.authenticated:
            return False
        session = self.session
        try:
            data = await profile_for(session).load(self.backend, session)
        except PortalException as e:
            if self._stale(session, "load"):
                return False
            self.cache.clear()
            self.selection.clear()
            self._report(e, "Failed to load suggestions", use_server_message=False)
            return False

        if self._stale(session, "load"):
            return False
        self.cache.replace_all(self._parse_records(data))
        if self.selection.id is not None and self.selection.id not in self.cache:
            self.selection.clear()
        logger.info(f"Loaded {len(self.cache)} suggestions for {session.email}")
        return True

    async def refresh(self) -> bool:
        """Manual refresh: ``load`` under the busy flag, then an info message."""
        return await self.feedback.with_loading(self.load)

    async def create(self, fields: Union[SuggestionDraft, Dict[str, Any]]) -> bool:
        draft = fields if isinstance(fields, SuggestionDraft) else SuggestionDraft.from_fields(fields)
        session = self.session
        try:
            self._require_session("submit a suggestion")
            if not self.profile.can_create:
                raise PermissionDeniedError("Only students can submit suggestions", action="create", role=self.profile.name)
            draft.validate()
            await self.backend.create_suggestion(draft.to_payload(session.email))
        except PortalException as e:
            if not self._stale(session, "create"):
                self._report(e, "Submit failed")
            return False
        if self._stale(session, "create"):
            return False

        # resync rather than append so server-assigned fields show up
        await self.load()
        if self._stale(session, "create"):
            return False
        self.feedback.notify("Suggestion submitted!", Severity.SUCCESS)
        return True

    async def remove(self, suggestion_id: str, confirm: ConfirmFn) -> bool:
        session = self.session
        try:
            self._require_session("delete a suggestion")
            if not self.profile.can_delete:
                raise PermissionDeniedError("Administrators cannot delete suggestions", action="delete", role=self.profile.name)
        except PortalException as e:
            self._report(e, "Delete failed")
            return False

        answer = confirm()
        if inspect.isawaitable(answer):
            answer = await answer
        if not answer:
            logger.debug(f"Delete of {suggestion_id} cancelled by user")
            return False
        if self._stale(session, "delete"):
            return False

        try:
            await self.backend.delete_suggestion(suggestion_id)
        except PortalException as e:
            if not self._stale(session, "delete"):
                self._report(e, "Delete failed")
            return False
        if self._stale(session, "delete"):
            return False

        self.cache.remove(suggestion_id)
        if self.selection.matches(suggestion_id):
            self.selection.clear()
        self.feedback.notify("Suggestion deleted successfully!", Severity.SUCCESS)
        return True

    async def change_status(self, suggestion_id: str, new_status: Union[Status, str]) -> bool:
        status_value = str(getattr(new_status, "value", new_status))
        session = self.session
        try:
            self._require_session("change status")
            if not self.profile.can_change_status:
                raise PermissionDeniedError("Only administrators can change status", action="change_status", role=self.profile.name)
            try:
                Status(status_value)
            except ValueError:
                raise ValidationError(f"Unknown status {status_value!r}", field="status", value=status_value)
            cached = self.cache.get(suggestion_id)
            if cached is not None and not can_transition(cached.status, status_value):
                raise ValidationError(
                    f"Cannot move a {cached.status_value} suggestion to {status_value}",
                    field="status",
                    value=status_value,
                )
            data = await profile_for(session).mutate(self.backend, session, suggestion_id, status_value)
            updated = self._parse_record(data, "update_status")
        except PortalException as e:
            if not self._stale(session, "change_status"):
                self._report(e, "Status update failed")
            return False
        if self._stale(session, "change_status"):
            return False

        self.cache.replace_one(updated)
        self.selection.refresh(updated)
        self.feedback.notify(f"Status updated to {status_value}", Severity.SUCCESS)
        return True

    async def view(self, suggestion_id: str) -> bool:
        session = self.session
        try:
            self._require_session("view a suggestion")
            data = await profile_for(session).view(self.backend, session, suggestion_id)
            record = self._parse_record(data, "view")
        except PortalException as e:
            if not self._stale(session, "view"):
                self._report(e, "Failed to load suggestion details")
            return False
        if self._stale(session, "view"):
            return False

        self.selection.select(record)
        return True

    def close_view(self) -> None:
        self.selection.clear()
