from __future__ import annotations

import streamlit as st

from suggestion_portal.app.board import BoardController
from suggestion_portal.domain.models import ALL, Category, SortOrder, Status

_SORT_LABELS = {SortOrder.NEWEST.value: "Newest First", SortOrder.OLDEST.value: "Oldest First"}


def render_filters(board: BoardController) -> None:
    f = board.filters
    status_opts = [ALL] + [s.value for s in Status]
    category_opts = [ALL] + [c.value for c in Category]
    sort_opts = [o.value for o in SortOrder]

    c1, c2, c3, c4 = st.columns([1, 1, 2, 1])
    with c1:
        status = st.selectbox(
            "Status",
            status_opts,
            index=status_opts.index(f.status_filter) if f.status_filter in status_opts else 0,
            format_func=lambda v: "All Status" if v == ALL else Status(v).label,
        )
    with c2:
        category = st.selectbox(
            "Category",
            category_opts,
            index=category_opts.index(f.category_filter) if f.category_filter in category_opts else 0,
            format_func=lambda v: "All Categories" if v == ALL else Category(v).label,
        )
    with c3:
        search = st.text_input("Search", value=f.search_term, placeholder="Search...")
    with c4:
        sort = st.selectbox(
            "Sort",
            sort_opts,
            index=sort_opts.index(SortOrder(f.sort_order).value),
            format_func=lambda v: _SORT_LABELS[v],
        )

    board.set_filters(status_filter=status, category_filter=category, search_term=search, sort_order=sort)
