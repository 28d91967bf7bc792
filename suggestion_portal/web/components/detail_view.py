from __future__ import annotations

import streamlit as st

from suggestion_portal.app.board import BoardController


def _fmt(dt) -> str:
    return dt.astimezone().strftime("%Y-%m-%d %H:%M:%S") if dt else ""


def render_detail(board: BoardController) -> None:
    s = board.detail
    if s is None:
        return
    with st.container(border=True):
        st.subheader(s.title)
        st.markdown(f"**Description:** {s.description}")
        st.markdown(f"**Category:** {s.category_value}")
        st.markdown(f"**Status:** `{s.status_value}`")
        if s.department:
            st.markdown(f"**Department:** {s.department}")
        if s.updated_by:
            st.markdown(f"**Updated By:** {s.updated_by}")
        st.markdown(f"**Submitted By:** {s.email}")
        if s.created_at:
            st.markdown(f"**Submitted On:** {_fmt(s.created_at)}")
        if s.updated_at:
            st.markdown(f"**Last Updated:** {_fmt(s.updated_at)}")
        if st.button("Close", key="close_detail"):
            board.close_view()
            st.rerun()
