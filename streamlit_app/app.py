"""
Recipe Favorites - Streamlit Frontend Main Entry Point.

Single page that lets the user:
- search TheMealDB through the backend and save results as favorites
- pull a random recipe and save it
- list, rename and remove saved favorites

Run with:
    streamlit run streamlit_app/app.py

Every backend call goes through utils.api_client. Failures are shown as an
error alert with the HTTP status or message; view state only changes after a
call succeeds.
"""

import sys
from pathlib import Path

# Ensure the streamlit_app directory is in the Python path
# This allows imports to work regardless of how the app is run
streamlit_app_dir = Path(__file__).parent
if str(streamlit_app_dir) not in sys.path:
    sys.path.insert(0, str(streamlit_app_dir))

# Add project root to path so we can import api.config and recipebox
project_root = streamlit_app_dir.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

# Import config early to load .env file before any other code accesses environment variables
import api.config  # noqa: F401

from typing import Any, Dict, Optional

import streamlit as st

from utils import api_client, state
from utils.api_client import ApiError
from ui.styles import load_global_styles
from ui.feedback import show_error, show_empty_state, working_spinner
from ui.cards import recipe_card, favorite_card, card_grid

# Page configuration - must be called before any other Streamlit commands
st.set_page_config(
    page_title="Simple Recipe App",
    page_icon="🍲",
    layout="centered",
)

load_global_styles()
state.init_state()


# ---------------------------------------------------------------------------
# Actions
# ---------------------------------------------------------------------------

def load_favorites() -> None:
    """Fetch favorites from the backend and replace the list."""
    try:
        state.set_favorites(api_client.list_favorites())
    except ApiError as e:
        show_error(e.message)


def run_pending_action(action: str, query: str) -> None:
    """
    Run the in-flight search or random request.

    Called on the script run after the button press, so the buttons render
    disabled while the request is out. Errors are kept in state and shown after
    the rerun that re-enables the buttons.
    """
    try:
        if action == "search":
            with working_spinner("Searching…"):
                state.set_results(api_client.search_recipes(query))
        else:
            with working_spinner("Picking a recipe…"):
                state.set_random_pick(api_client.get_random_recipe())
    except ApiError as e:
        state.set_error(e.message)
    finally:
        state.finish_action()


def save(recipe: Dict[str, Any]) -> None:
    """Save a normalized recipe as a favorite, then reload favorites."""
    try:
        api_client.save_favorite(recipe["id"], recipe["title"], recipe["thumb"], recipe["source"])
    except ApiError as e:
        show_error(e.message)
        return
    load_favorites()


def remove(favorite_id: str) -> None:
    try:
        api_client.remove_favorite(favorite_id)
    except ApiError as e:
        show_error(e.message)
        return
    load_favorites()
    st.rerun()


def rename(favorite_id: str, new_title: str) -> None:
    try:
        api_client.update_favorite_title(favorite_id, new_title)
    except ApiError as e:
        show_error(e.message)
        return
    state.set_editing_id(None)
    load_favorites()
    st.rerun()


def toggle_edit(favorite_id: Optional[str]) -> None:
    state.set_editing_id(favorite_id)
    st.rerun()


# Fetch favorites once per session
if not state.favorites_loaded():
    load_favorites()


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------

st.title("Simple Recipe App")
st.markdown(
    '<p class="rf-muted">Search or get a random recipe. Save favorites (persisted to a local database).</p>',
    unsafe_allow_html=True,
)

col_query, col_search, col_random = st.columns([4, 1, 1], vertical_alignment="bottom")
with col_query:
    query = st.text_input(
        "Search",
        key=state.QUERY_KEY,
        placeholder="Search recipes (e.g., chicken)",
        label_visibility="collapsed",
    )
with col_search:
    search_clicked = st.button(
        "…" if state.is_loading() else "Search",
        disabled=state.is_loading() or not query.strip(),
        use_container_width=True,
    )
with col_random:
    random_clicked = st.button(
        "…" if state.is_loading() else "Random",
        disabled=state.is_loading(),
        use_container_width=True,
    )

if search_clicked:
    state.start_action("search")
    st.rerun()
if random_clicked:
    state.start_action("random")
    st.rerun()

pending_action = state.get_pending_action()
if pending_action:
    run_pending_action(pending_action, query)
    st.rerun()

last_error = state.pop_error()
if last_error:
    show_error(last_error)

random_pick = state.get_random_pick()
if random_pick:
    with st.container(border=True):
        st.markdown("### Random")
        recipe_card(random_pick, on_save=save, key="random")

st.markdown("## Results")
results = state.get_results()
if results:
    card_grid(results, lambda item, i: recipe_card(item, on_save=save, key=f"result_{i}"))
elif not state.is_loading():
    show_empty_state("No results yet. Try a search.")

st.markdown("## Favorites")
favorites = state.get_favorites()
if favorites:
    editing_id = state.get_editing_id()
    card_grid(
        favorites,
        lambda fav, i: favorite_card(
            fav,
            on_remove=remove,
            on_rename=rename,
            editing=str(fav.get("id")) == str(editing_id),
            on_toggle_edit=toggle_edit,
        ),
    )
else:
    show_empty_state("No favorites saved.")
