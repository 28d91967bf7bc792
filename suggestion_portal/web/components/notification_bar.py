from __future__ import annotations

import streamlit as st

from suggestion_portal.app.board import BoardController
from suggestion_portal.domain.models import Severity


def render_notification(board: BoardController) -> None:
    """Show the live notification, if any; expired ones are already gone."""
    n = board.notification
    if n is None:
        return
    if n.severity == Severity.ERROR:
        st.error(n.message)
    elif n.severity == Severity.INFO:
        st.info(n.message)
    else:
        st.success(n.message)
