"""
Standardized feedback utilities for errors, empty states, and loading indicators.
"""

from contextlib import contextmanager

import streamlit as st


def show_error(message: str) -> None:
    """
    Display a blocking error alert.

    Args:
        message: Error message, shown verbatim (e.g. "Search failed: 500")
    """
    st.error(f"⚠️ {message}")


def show_empty_state(text: str) -> None:
    """
    Display a muted one-line empty state.

    Args:
        text: Message such as "No favorites saved."
    """
    st.markdown(f'<div class="rf-muted">{text}</div>', unsafe_allow_html=True)


@contextmanager
def working_spinner(label: str = "Working…"):
    """
    Context manager wrapper for standardized loading spinners.

    Usage:
        with working_spinner("Searching…"):
            results = search_recipes(query)
    """
    with st.spinner(label):
        yield
