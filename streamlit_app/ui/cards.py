"""
Recipe and favorite cards.

Cards accept any recipe-shaped dict (search result, random pick, stored
favorite) and normalize it before rendering, so aliased fields such as
``strMeal`` or ``image`` display the same way as canonical ones.
"""

from html import escape
from typing import Any, Callable, Dict, List, Optional

import streamlit as st

from recipebox.normalize import normalize_record

NO_TITLE = "(no title)"
GRID_COLUMNS = 3


def render_thumb(thumb: str, title: str) -> None:
    """Render the recipe image, or a "No image" placeholder."""
    if thumb:
        st.image(thumb, caption=None, use_container_width=True)
    else:
        st.markdown('<div class="rf-img-placeholder">No image</div>', unsafe_allow_html=True)


def recipe_card(item: Dict[str, Any], on_save: Callable[[Dict[str, Any]], None], key: str) -> None:
    """
    Render a recipe card with a Save button and an optional Source link.

    Args:
        item: Recipe-like dict
        on_save: Called with the normalized recipe when Save is pressed
        key: Unique widget key prefix
    """
    recipe = normalize_record(item)
    title = recipe["title"] or NO_TITLE

    with st.container(border=True):
        st.markdown(f'<span class="rf-card-title">{escape(title)}</span>', unsafe_allow_html=True)
        render_thumb(recipe["thumb"], title)

        col_save, col_link = st.columns(2)
        with col_save:
            if st.button("Save", key=f"{key}_save", use_container_width=True):
                on_save(recipe)
        with col_link:
            if recipe["source"]:
                st.link_button("Source", recipe["source"], use_container_width=True)


def favorite_card(
    favorite: Dict[str, Any],
    on_remove: Callable[[str], None],
    on_rename: Callable[[str, str], None],
    editing: bool,
    on_toggle_edit: Callable[[Optional[str]], None],
) -> None:
    """
    Render a saved favorite with Remove, Edit and Source actions.

    Edit opens an inline title input; submitting a blank title cancels the edit.

    Args:
        favorite: Favorite dict as returned by the backend
        on_remove: Called with the favorite id
        on_rename: Called with the favorite id and the new title
        editing: Whether the title editor is open for this card
        on_toggle_edit: Called with the id to open the editor, or None to close it
    """
    recipe = normalize_record(favorite)
    favorite_id = recipe["id"]
    title = recipe["title"] or NO_TITLE

    with st.container(border=True):
        st.markdown(f'<span class="rf-card-title">{escape(title)}</span>', unsafe_allow_html=True)
        render_thumb(recipe["thumb"], title)

        col_remove, col_edit, col_link = st.columns(3)
        with col_remove:
            if st.button("Remove", key=f"fav_{favorite_id}_remove", use_container_width=True):
                on_remove(favorite_id)
        with col_edit:
            if st.button("Edit", key=f"fav_{favorite_id}_edit", use_container_width=True):
                on_toggle_edit(None if editing else favorite_id)
        with col_link:
            if recipe["source"]:
                st.link_button("Source", recipe["source"], use_container_width=True)

        if editing:
            with st.form(key=f"fav_{favorite_id}_rename_form", clear_on_submit=True):
                new_title = st.text_input("New title?", value="", key=f"fav_{favorite_id}_new_title")
                if st.form_submit_button("Update"):
                    if new_title.strip():
                        on_rename(favorite_id, new_title)
                    else:
                        on_toggle_edit(None)


def card_grid(items: List[Dict[str, Any]], render: Callable[[Dict[str, Any], int], None]) -> None:
    """
    Lay out cards in rows of GRID_COLUMNS columns.

    Args:
        items: Items to render
        render: Called with (item, index) inside the item's column
    """
    for row_start in range(0, len(items), GRID_COLUMNS):
        cols = st.columns(GRID_COLUMNS)
        for offset, item in enumerate(items[row_start:row_start + GRID_COLUMNS]):
            with cols[offset]:
                render(item, row_start + offset)
