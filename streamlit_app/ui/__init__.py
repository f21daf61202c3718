"""
UI Styling and Components Module.

This module provides global CSS styling and reusable UI components
for the Recipe Favorites Streamlit app.
"""

from ui.styles import load_global_styles
from ui.feedback import show_error, show_empty_state, working_spinner
from ui.cards import recipe_card, favorite_card, card_grid

__all__ = [
    "load_global_styles",
    "show_error",
    "show_empty_state",
    "working_spinner",
    "recipe_card",
    "favorite_card",
    "card_grid",
]
