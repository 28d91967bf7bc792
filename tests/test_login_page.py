"""
Unit tests: credential hand-off on the login page
"""
from suggestion_portal.web.pages_impl import login


def test_query_credential_is_read_once_and_removed(monkeypatch):
    params = {login.CREDENTIAL_PARAM: "google-jwt", "tab": "board"}
    monkeypatch.setattr(login.st, "query_params", params)

    assert login._consume_query_credential() == "google-jwt"
    assert params == {"tab": "board"}
    assert login._consume_query_credential() == ""


def test_missing_credential_leaves_url_alone(monkeypatch):
    params = {"tab": "board"}
    monkeypatch.setattr(login.st, "query_params", params)

    assert login._consume_query_credential() == ""
    assert params == {"tab": "board"}
