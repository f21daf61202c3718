"""
View State Management Module.

This module wraps Streamlit's session_state to hold the client-local view state
of the recipe page:

- `query`: current search text
- `results`: last search results (list of recipe dicts)
- `random_pick`: the currently displayed random recipe, or None
- `favorites`: favorites as last loaded from the backend
- `loading`: True while a search or random request is in flight
- `favorites_loaded`: whether the one-time favorites fetch already ran
- `pending_action`: "search" or "random" while that request waits for its run
- `last_error`: message of a failed search/random, shown on the next run

State is only replaced after a backend call succeeds; a failed call leaves the
previous values in place.
"""

from typing import Any, Dict, List, Optional

import streamlit as st

QUERY_KEY = "query"
RESULTS_KEY = "results"
RANDOM_KEY = "random_pick"
FAVORITES_KEY = "favorites"
LOADING_KEY = "loading"
FAVORITES_LOADED_KEY = "favorites_loaded"
EDITING_KEY = "editing_favorite_id"
PENDING_KEY = "pending_action"
ERROR_KEY = "last_error"

_DEFAULTS = {
    QUERY_KEY: "",
    RESULTS_KEY: [],
    RANDOM_KEY: None,
    FAVORITES_KEY: [],
    LOADING_KEY: False,
    FAVORITES_LOADED_KEY: False,
    EDITING_KEY: None,
    PENDING_KEY: None,
    ERROR_KEY: None,
}


def init_state() -> None:
    """
    Ensure every view state key exists in session state.

    Call this at the top of the page before reading any state.
    """
    for key, default in _DEFAULTS.items():
        if key not in st.session_state:
            # Fresh list per session so sessions never share a default
            st.session_state[key] = list(default) if isinstance(default, list) else default


def get_results() -> List[Dict[str, Any]]:
    return st.session_state.get(RESULTS_KEY, [])


def set_results(results: List[Dict[str, Any]]) -> None:
    st.session_state[RESULTS_KEY] = list(results)


def get_random_pick() -> Optional[Dict[str, Any]]:
    return st.session_state.get(RANDOM_KEY)


def set_random_pick(recipe: Optional[Dict[str, Any]]) -> None:
    st.session_state[RANDOM_KEY] = recipe or None


def get_favorites() -> List[Dict[str, Any]]:
    return st.session_state.get(FAVORITES_KEY, [])


def set_favorites(favorites: List[Dict[str, Any]]) -> None:
    st.session_state[FAVORITES_KEY] = list(favorites)
    st.session_state[FAVORITES_LOADED_KEY] = True


def favorites_loaded() -> bool:
    return bool(st.session_state.get(FAVORITES_LOADED_KEY, False))


def is_loading() -> bool:
    return bool(st.session_state.get(LOADING_KEY, False))


def get_editing_id() -> Optional[str]:
    """Id of the favorite whose title editor is open, if any."""
    return st.session_state.get(EDITING_KEY)


def set_editing_id(favorite_id: Optional[str]) -> None:
    st.session_state[EDITING_KEY] = favorite_id


def start_action(action: str) -> None:
    """
    Mark a search or random request as in flight.

    The request itself runs on the next script run, so the page first renders
    with the buttons disabled.
    """
    st.session_state[LOADING_KEY] = True
    st.session_state[PENDING_KEY] = action


def get_pending_action() -> Optional[str]:
    return st.session_state.get(PENDING_KEY)


def finish_action() -> None:
    """Clear the in-flight request. An interrupted run leaves it pending and it is retried."""
    st.session_state[LOADING_KEY] = False
    st.session_state[PENDING_KEY] = None


def set_error(message: Optional[str]) -> None:
    st.session_state[ERROR_KEY] = message


def pop_error() -> Optional[str]:
    message = st.session_state.get(ERROR_KEY)
    st.session_state[ERROR_KEY] = None
    return message
