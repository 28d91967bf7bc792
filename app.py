import streamlit as st

from suggestion_portal.infra.exceptions import ConfigError
from suggestion_portal.web.framework.page import init_page, PageSpec
from suggestion_portal.web.framework.state import get_board
from suggestion_portal.web.pages_impl import board as board_page
from suggestion_portal.web.pages_impl import login as login_page

# MUST be the first Streamlit command on this page
init_page(PageSpec(title="Suggestion Portal", icon="🗳️"))

try:
    board = get_board()
except ConfigError as e:
    st.error(f"Configuration error: {e.message}")
    st.stop()

if board.session.authenticated:
    board_page.render(board)
else:
    login_page.render(board)
