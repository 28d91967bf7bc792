from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Dict, Optional, TypeVar

import streamlit as st

from suggestion_portal.app.board import BoardController
from suggestion_portal.config import PortalSettings, load_settings
from suggestion_portal.infra.logging import configure_from_settings

T = TypeVar("T")

BOARD_KEY = "board"
SETTINGS_KEY = "portal_settings"
PENDING_DELETE_KEY = "pending_delete"
SELECTED_ROW_KEY = "selected_row"


def ensure_defaults(defaults: Dict[str, Any]) -> None:
    """Ensure session_state has default values for keys."""
    for k, v in defaults.items():
        if k not in st.session_state:
            st.session_state[k] = v


def get_settings() -> PortalSettings:
    if SETTINGS_KEY not in st.session_state:
        settings = load_settings()
        configure_from_settings(settings)
        st.session_state[SETTINGS_KEY] = settings
    return st.session_state[SETTINGS_KEY]


def get_board() -> BoardController:
    """One board per browser session, created on first use."""
    if BOARD_KEY not in st.session_state:
        st.session_state[BOARD_KEY] = BoardController.from_settings(get_settings())
    ensure_defaults({PENDING_DELETE_KEY: None, SELECTED_ROW_KEY: None})
    return st.session_state[BOARD_KEY]


def run(coro: Awaitable[T]) -> T:
    """Drive a board coroutine to completion from the script thread.

    Each Streamlit rerun is synchronous, so every action gets its own loop.
    """
    return asyncio.run(coro)


def pending_delete() -> Optional[str]:
    return st.session_state.get(PENDING_DELETE_KEY)


def set_pending_delete(suggestion_id: Optional[str]) -> None:
    st.session_state[PENDING_DELETE_KEY] = suggestion_id
