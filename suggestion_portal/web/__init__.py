"""Streamlit presentation layer. Holds no state logic of its own."""
