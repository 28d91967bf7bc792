from __future__ import annotations

import streamlit as st

from suggestion_portal.app.board import BoardController
from suggestion_portal.domain.models import Category
from suggestion_portal.web.framework.state import run


def render_submit_form(board: BoardController) -> None:
    """Student-only form; the board validates and reloads on success."""
    if not board.profile.can_create:
        return
    with st.container(border=True):
        st.subheader("Submit Suggestion")
        with st.form("submit_suggestion", clear_on_submit=True):
            category = st.selectbox(
                "Category",
                [""] + [c.value for c in Category],
                format_func=lambda v: "Select Category" if not v else Category(v).label,
            )
            title = st.text_input("Title")
            description = st.text_area("Description", height=120)
            submitted = st.form_submit_button("Submit", type="primary")

        if submitted:
            run(board.create({"category": category, "title": title, "description": description}))
            st.rerun()
