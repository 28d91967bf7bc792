from __future__ import annotations

import json

import streamlit as st
import streamlit.components.v1 as components

from suggestion_portal.app.board import BoardController
from suggestion_portal.web.components.notification_bar import render_notification
from suggestion_portal.web.framework.state import get_settings, run

CREDENTIAL_PARAM = "credential"

# The button hands the credential back through a top-level query parameter.
# It is stripped from the URL on first read, but may still land in browser
# history, and a sandboxed components iframe can block the navigation
# outright. The manual paste form below is the route that always works.
_GSI_TEMPLATE = """
<script src="https://accounts.google.com/gsi/client" async defer></script>
<div id="g_id_button"></div>
<script>
  window.onload = function () {
    google.accounts.id.initialize({
      client_id: %s,
      callback: function (response) {
        const url = new URL(window.top.location.href);
        url.searchParams.set("credential", response.credential || "");
        window.top.location.href = url.toString();
      }
    });
    google.accounts.id.renderButton(document.getElementById("g_id_button"), {
      theme: "filled_blue", size: "large", type: "standard", text: "signin_with"
    });
  };
</script>
"""


def _consume_query_credential() -> str:
    token = st.query_params.get(CREDENTIAL_PARAM, "")
    if CREDENTIAL_PARAM in st.query_params:
        del st.query_params[CREDENTIAL_PARAM]
    return token


def render(board: BoardController) -> None:
    render_notification(board)

    token = _consume_query_credential()
    if token:
        run(board.complete_login(token))
        st.rerun()

    st.title("Student & Staff Suggestion Portal")
    st.markdown("Login with your official college email to submit suggestions and complaints.")

    client_id = get_settings().google_client_id
    if client_id:
        components.html(_GSI_TEMPLATE % json.dumps(client_id), height=60)
    else:
        st.caption("PORTAL_GOOGLE_CLIENT_ID is not set; paste a credential below.")

    with st.form("manual_login"):
        pasted = st.text_input("Google credential", type="password")
        if st.form_submit_button("Sign in"):
            run(board.complete_login(pasted.strip()))
            st.rerun()

    st.caption("Use only your official college email address")
