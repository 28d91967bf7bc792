"""Frontend framework layer for the Streamlit UI.

This package centralizes:
- page initialization (set_page_config)
- session-state helpers (the board controller lives in session_state)
- running board coroutines from Streamlit callbacks
"""
