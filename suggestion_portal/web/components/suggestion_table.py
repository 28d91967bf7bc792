from __future__ import annotations

from typing import Sequence

import pandas as pd
import streamlit as st

from suggestion_portal.app.board import DELETE_CONFIRM_PROMPT, BoardController
from suggestion_portal.app.capabilities import ACTION_DELETE, ACTION_VIEW
from suggestion_portal.domain.models import Status, Suggestion
from suggestion_portal.web.framework.state import (
    SELECTED_ROW_KEY,
    pending_delete,
    run,
    set_pending_delete,
)

_ACTION_LABELS = {
    ACTION_VIEW: "View",
    Status.IN_PROGRESS.value: "In Progress",
    Status.RESOLVED.value: "Resolve",
    Status.INVALID.value: "Invalid",
    ACTION_DELETE: "Delete",
}


def to_frame(rows: Sequence[Suggestion]) -> pd.DataFrame:
    """Table view of the filtered rows, in display order."""
    return pd.DataFrame(
        [
            {
                "Title": s.title,
                "Category": s.category_value,
                "Description": s.description_preview,
                "Status": s.status_label,
                "Email": s.email,
                "Date": s.created_at.astimezone().strftime("%Y-%m-%d %H:%M") if s.created_at else "",
            }
            for s in rows
        ],
        columns=["Title", "Category", "Description", "Status", "Email", "Date"],
    )


def _dispatch(board: BoardController, action: str, s: Suggestion) -> None:
    if action == ACTION_VIEW:
        run(board.view(s.id))
    elif action == ACTION_DELETE:
        set_pending_delete(s.id)
    else:
        run(board.change_status(s.id, action))
    st.rerun()


def _render_delete_gate(board: BoardController) -> None:
    target = pending_delete()
    if target is None:
        return
    with st.container(border=True):
        st.warning(DELETE_CONFIRM_PROMPT)
        yes, no = st.columns(2)
        if yes.button("Yes, delete", type="primary", key="confirm_delete"):
            set_pending_delete(None)
            run(board.remove(target, confirm=lambda: True))
            st.rerun()
        if no.button("Cancel", key="cancel_delete"):
            set_pending_delete(None)
            run(board.remove(target, confirm=lambda: False))
            st.rerun()


def render_suggestion_table(board: BoardController) -> None:
    rows = board.visible
    if not rows:
        st.info("No suggestions found")
        return

    st.dataframe(to_frame(rows), use_container_width=True, hide_index=True)

    by_id = {s.id: s for s in rows}
    ids = list(by_id)
    current = st.session_state.get(SELECTED_ROW_KEY)
    selected = st.selectbox(
        "Suggestion",
        ids,
        index=ids.index(current) if current in by_id else 0,
        format_func=lambda i: f"{by_id[i].title} · {by_id[i].status_label}",
    )
    st.session_state[SELECTED_ROW_KEY] = selected

    s = by_id[selected]
    actions = board.row_actions(s)
    cols = st.columns(len(actions))
    for col, action in zip(cols, actions):
        if col.button(_ACTION_LABELS.get(action, action), key=f"act_{action}_{s.id}"):
            _dispatch(board, action, s)

    _render_delete_gate(board)
