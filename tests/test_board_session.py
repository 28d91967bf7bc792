"""
Unit tests: login / logout on the board controller
"""
import asyncio

from conftest import ADMIN_EMAIL, STUDENT_EMAIL
from suggestion_portal.domain.models import FilterControls, Session, Severity
from suggestion_portal.infra.exceptions import APIError, NetworkError


class TestLogin:

    def test_successful_login_populates_session_and_loads(self, board, backend):
        session = asyncio.run(board.complete_login("tok"))

        assert session.authenticated is True
        assert session.email == STUDENT_EMAIL
        assert session.role.is_admin is False
        assert board.session is session
        assert backend.call_names() == ["exchange_token", "list_student_suggestions"]
        assert backend.calls[0] == ("exchange_token", "tok")
        assert {s.id for s in board.cache} == {"1", "2"}
        assert board.notification.message == "Logged in successfully!"
        assert board.notification.severity == Severity.SUCCESS

    def test_admin_login_uses_admin_list(self, board, backend):
        backend.auth_payload = {"email": ADMIN_EMAIL, "isAdmin": True, "department": "IT"}
        asyncio.run(board.complete_login("tok"))
        assert board.session.role.is_admin is True
        assert board.session.role.is_principal is False
        assert board.session.department == "IT"
        assert backend.calls[-1] == ("list_admin_suggestions", ADMIN_EMAIL)

    def test_missing_credential_short_circuits(self, board, backend):
        asyncio.run(board.complete_login(""))
        assert backend.calls == []
        assert board.session == Session.anonymous()
        assert board.notification.message == "No credential returned"
        assert board.notification.severity == Severity.ERROR

    def test_server_error_message_is_shown_verbatim(self, board, backend):
        backend.errors["exchange_token"] = APIError(
            "login failed", api_name="login", status_code=403, server_message="Only @ybit.ac.in accounts allowed"
        )
        session = asyncio.run(board.complete_login("tok"))
        assert session.authenticated is False
        assert board.session == Session.anonymous()
        assert board.notification.message == "Only @ybit.ac.in accounts allowed"
        assert backend.call_names() == ["exchange_token"]

    def test_error_without_message_falls_back(self, board, backend):
        backend.errors["exchange_token"] = APIError("login failed", api_name="login", status_code=500)
        asyncio.run(board.complete_login("tok"))
        assert board.notification.message == "Login failed"

    def test_network_failure(self, board, backend):
        backend.errors["exchange_token"] = NetworkError("connection refused")
        asyncio.run(board.complete_login("tok"))
        assert board.session.authenticated is False
        assert board.notification.message == "Login error. Check console."

    def test_response_without_email_never_half_populates(self, board, backend):
        backend.auth_payload = {"isAdmin": True, "department": "IT"}
        asyncio.run(board.complete_login("tok"))
        assert board.session == Session.anonymous()
        assert board.notification.severity == Severity.ERROR


class TestLogout:

    def test_logout_resets_everything(self, student_board):
        board = student_board
        asyncio.run(board.view("1"))
        board.set_filters(status_filter="pending", search_term="x")

        board.logout()

        assert board.session == Session.anonymous()
        assert len(board.cache) == 0
        assert board.detail is None
        assert board.filters == FilterControls()
        assert board.busy is False
        assert board.notification.message == "Logged out successfully"
        assert board.notification.severity == Severity.INFO

    def test_logout_is_idempotent(self, student_board):
        student_board.logout()
        student_board.logout()
        assert student_board.session == Session.anonymous()
        assert student_board.notification.message == "Logged out successfully"

    def test_no_identity_calls_after_logout(self, student_board, backend):
        board = student_board
        board.logout()
        backend.calls.clear()

        async def everything():
            await board.load()
            await board.refresh()
            await board.create({"category": "other", "title": "t", "description": "d"})
            await board.remove("1", confirm=lambda: True)
            await board.change_status("1", "resolved")
            await board.view("1")

        asyncio.run(everything())
        assert backend.calls == []
        assert len(board.cache) == 0

    def test_list_arriving_after_logout_is_discarded(self, student_board, backend):
        board = student_board

        async def scenario():
            gate = asyncio.Event()
            original = backend.list_student_suggestions

            async def slow_list(email):
                await gate.wait()
                return await original(email)

            backend.list_student_suggestions = slow_list
            task = asyncio.ensure_future(board.load())
            await asyncio.sleep(0)
            board.logout()
            gate.set()
            return await task

        assert asyncio.run(scenario()) is False
        assert len(board.cache) == 0

    @staticmethod
    def _logout_while_in_flight(board, backend, method, action):
        """Hold ``backend.method`` until the board has logged out, then release it."""
        async def scenario():
            gate = asyncio.Event()
            original = getattr(backend, method)

            async def held(*args):
                await gate.wait()
                return await original(*args)

            setattr(backend, method, held)
            task = asyncio.ensure_future(action())
            await asyncio.sleep(0)
            board.logout()
            gate.set()
            return await task

        return asyncio.run(scenario())

    def test_detail_arriving_after_logout_is_discarded(self, student_board, backend):
        board = student_board
        ok = self._logout_while_in_flight(board, backend, "view_student_suggestion", lambda: board.view("1"))
        assert ok is False
        assert board.detail is None
        assert board.notification.message == "Logged out successfully"

    def test_delete_finishing_after_logout_leaves_no_trace(self, student_board, backend):
        board = student_board
        ok = self._logout_while_in_flight(
            board, backend, "delete_suggestion", lambda: board.remove("1", confirm=lambda: True)
        )
        assert ok is False
        assert len(board.cache) == 0
        assert board.notification.message == "Logged out successfully"

    def test_create_finishing_after_logout_does_not_reload(self, student_board, backend):
        board = student_board
        ok = self._logout_while_in_flight(
            board, backend, "create_suggestion",
            lambda: board.create({"category": "other", "title": "t", "description": "d"}),
        )
        assert ok is False
        assert backend.call_names() == ["create_suggestion"]
        assert len(board.cache) == 0
        assert board.notification.message == "Logged out successfully"

    def test_status_change_finishing_after_logout_is_discarded(self, admin_board, backend):
        board = admin_board
        ok = self._logout_while_in_flight(board, backend, "update_status", lambda: board.change_status("1", "resolved"))
        assert ok is False
        assert len(board.cache) == 0
        assert board.notification.message == "Logged out successfully"

    def test_failure_arriving_after_logout_is_not_reported(self, student_board, backend):
        board = student_board
        backend.errors["view_student_suggestion"] = APIError("view failed", status_code=404, server_message="Suggestion not found")
        ok = self._logout_while_in_flight(board, backend, "view_student_suggestion", lambda: board.view("1"))
        assert ok is False
        assert board.notification.message == "Logged out successfully"
