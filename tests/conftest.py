"""
Shared fixtures: an in-memory backend and a board wired to it.
"""
import asyncio
import copy
from datetime import datetime, timezone

import pytest

from suggestion_portal.app.board import BoardController
from suggestion_portal.infra.common import MockClock
from suggestion_portal.infra.exceptions import APIError
from suggestion_portal.ports.backend import BackendAPI

STUDENT_EMAIL = "asha@ybit.ac.in"
ADMIN_EMAIL = "hod.it@ybit.ac.in"


def make_record(sid, status="pending", created_at="2024-01-01T10:00:00Z", **extra):
    rec = {
        "_id": sid,
        "title": f"Title {sid}",
        "description": f"Description for {sid}",
        "category": "facilities",
        "status": status,
        "email": STUDENT_EMAIL,
        "department": "IT",
        "updatedBy": "",
        "createdAt": created_at,
        "updatedAt": "",
    }
    rec.update(extra)
    return rec


class FakeBackend(BackendAPI):
    """Backend port kept in memory; records every call."""

    def __init__(self):
        self.calls = []
        self.errors = {}
        self.auth_payload = {"email": STUDENT_EMAIL, "isAdmin": False, "isPrincipal": False, "department": ""}
        self.records = [
            make_record("1", "pending", "2024-01-01T10:00:00Z"),
            make_record("2", "resolved", "2024-01-02T10:00:00Z", updatedBy="HOD"),
        ]
        self.list_override = None
        self._next_id = 100

    def _call(self, name, *args):
        self.calls.append((name, *args))
        err = self.errors.get(name)
        if err is not None:
            raise err

    def call_names(self):
        return [c[0] for c in self.calls]

    def _find(self, suggestion_id):
        for r in self.records:
            if r["_id"] == suggestion_id:
                return r
        raise APIError("not found", api_name="view", status_code=404, server_message="Suggestion not found")

    async def exchange_token(self, token):
        self._call("exchange_token", token)
        return dict(self.auth_payload)

    async def list_admin_suggestions(self, email):
        self._call("list_admin_suggestions", email)
        return copy.deepcopy(self.records) if self.list_override is None else self.list_override

    async def list_student_suggestions(self, email):
        self._call("list_student_suggestions", email)
        return copy.deepcopy(self.records) if self.list_override is None else self.list_override

    async def create_suggestion(self, payload):
        self._call("create_suggestion", payload)
        self._next_id += 1
        rec = make_record(str(self._next_id), "pending", "2024-02-01T09:00:00Z", **payload)
        self.records.append(rec)
        return copy.deepcopy(rec)

    async def delete_suggestion(self, suggestion_id):
        self._call("delete_suggestion", suggestion_id)
        self._find(suggestion_id)
        self.records = [r for r in self.records if r["_id"] != suggestion_id]
        return {"message": "Suggestion deleted"}

    async def update_status(self, suggestion_id, status, updated_by):
        self._call("update_status", suggestion_id, status, updated_by)
        rec = self._find(suggestion_id)
        rec["status"] = status
        rec["updatedBy"] = updated_by
        rec["updatedAt"] = "2024-03-01T12:00:00Z"
        return copy.deepcopy(rec)

    async def view_admin_suggestion(self, suggestion_id):
        self._call("view_admin_suggestion", suggestion_id)
        return copy.deepcopy(self._find(suggestion_id))

    async def view_student_suggestion(self, suggestion_id, email):
        self._call("view_student_suggestion", suggestion_id, email)
        return copy.deepcopy(self._find(suggestion_id))


@pytest.fixture
def clock():
    return MockClock(datetime(2024, 5, 1, 8, 0, tzinfo=timezone.utc))


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def board(backend, clock):
    return BoardController(backend, clock=clock)


@pytest.fixture
def student_board(board):
    asyncio.run(board.complete_login("student-token"))
    board.backend.calls.clear()
    return board


@pytest.fixture
def admin_board(board, backend):
    backend.auth_payload = {"email": ADMIN_EMAIL, "isAdmin": True, "isPrincipal": False, "department": "IT"}
    asyncio.run(board.complete_login("admin-token"))
    backend.calls.clear()
    return board


@pytest.fixture
def principal_board(board, backend):
    backend.auth_payload = {"email": "principal@ybit.ac.in", "isAdmin": True, "isPrincipal": True, "department": ""}
    asyncio.run(board.complete_login("principal-token"))
    backend.calls.clear()
    return board
