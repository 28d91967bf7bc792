from __future__ import annotations

from dataclasses import dataclass
import streamlit as st


@dataclass(frozen=True)
class PageSpec:
    title: str
    icon: str
    layout: str = "wide"
    sidebar_state: str = "collapsed"


def init_page(spec: PageSpec) -> None:
    """Initialize a Streamlit page in a consistent way.

    NOTE: This must be called before any other Streamlit command on a page.
    """
    st.set_page_config(
        page_title=spec.title,
        page_icon=spec.icon,
        layout=spec.layout,
        initial_sidebar_state=spec.sidebar_state,
    )


__all__ = ["PageSpec", "init_page"]
