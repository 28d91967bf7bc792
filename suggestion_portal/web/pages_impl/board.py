from __future__ import annotations

import streamlit as st

from suggestion_portal.app.board import BoardController
from suggestion_portal.web.components.detail_view import render_detail
from suggestion_portal.web.components.filters_bar import render_filters
from suggestion_portal.web.components.notification_bar import render_notification
from suggestion_portal.web.components.submit_form import render_submit_form
from suggestion_portal.web.components.suggestion_table import render_suggestion_table
from suggestion_portal.web.framework.state import run, set_pending_delete
from suggestion_portal.web.framework.user_context import get_user_context


def render(board: BoardController) -> None:
    render_notification(board)
    ctx = get_user_context(board)

    head, logout = st.columns([5, 1])
    with head:
        st.title(board.dashboard_title)
        st.markdown(f"Logged in as: **{ctx.email}**")
    with logout:
        if st.button("Logout", use_container_width=True):
            set_pending_delete(None)
            board.logout()
            st.rerun()

    if st.button("Refresh", disabled=board.busy):
        with st.spinner("Refreshing..."):
            run(board.refresh())
        st.rerun()

    render_submit_form(board)
    render_filters(board)
    render_suggestion_table(board)
    render_detail(board)
