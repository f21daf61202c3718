"""
Global CSS Styling for the Recipe Favorites app.

This module provides load_global_styles() to inject the olive palette used by
buttons, inputs and recipe cards.
"""

import streamlit as st

OLIVE_BORDER = "#8fa05f"
OLIVE_BUTTON = "#b7c68b"
OLIVE_INPUT = "#e6ecd1"
OLIVE_TEXT = "#1b1f10"


def load_global_styles() -> None:
    """
    Inject global CSS styles.

    This function:
    - Narrows the content column and puts it on a light page background
    - Applies the olive palette to text inputs, buttons and link buttons
    - Styles recipe cards and the "No image" placeholder
    """
    css = f"""
    <style>
        .stApp {{
            background: #f6f7fb;
        }}

        .block-container {{
            max-width: 900px !important;
            background: #fff;
            border-radius: 14px;
            box-shadow: 0 8px 24px rgba(0, 0, 0, .06);
            padding: 1.25rem 1.25rem 2rem 1.25rem !important;
        }}

        .stTextInput input {{
            border: 1px solid {OLIVE_BORDER} !important;
            border-radius: 12px !important;
            background: {OLIVE_INPUT} !important;
            color: {OLIVE_TEXT} !important;
        }}

        .stButton > button, .stLinkButton > a {{
            border: 1px solid {OLIVE_BORDER} !important;
            border-radius: 12px !important;
            background: {OLIVE_BUTTON} !important;
            color: {OLIVE_TEXT} !important;
        }}

        .stLinkButton > a {{
            background: {OLIVE_INPUT} !important;
        }}

        .rf-card-title {{
            display: block;
            margin-bottom: 6px;
            color: #111;
            font-weight: 700;
        }}

        .rf-img-placeholder {{
            width: 100%;
            height: 140px;
            display: grid;
            place-items: center;
            background: #eaeef6;
            color: #555;
            border-radius: 8px;
        }}

        .rf-muted {{
            opacity: 0.7;
        }}
    </style>
    """
    st.markdown(css, unsafe_allow_html=True)
