"""
Global CSS Styling for the recipe catalog admin.

This module provides load_global_styles() to inject consistent styling
across all pages. Purely cosmetic.
"""

import html

import streamlit as st


def load_global_styles() -> None:
    """
    Inject global CSS styles.

    This function:
    - Imports the DM Sans font
    - Sets heading weights and the content width
    - Gives buttons rounded corners and cards a subtle border
    """
    css = """
    <style>
        @import url('https://fonts.googleapis.com/css2?family=DM+Sans:wght@400;500;700&display=swap');

        html, body, [class*="css"] {
            font-family: 'DM Sans', sans-serif !important;
        }

        h1, h2, h3, h4, h5, h6 {
            font-weight: 700 !important;
            color: #2B3674 !important;
            letter-spacing: -0.01em !important;
        }

        .main .block-container {
            max-width: 1280px !important;
            padding-top: 1.5rem !important;
            padding-bottom: 2.5rem !important;
        }

        .stButton > button {
            border-radius: 16px !important;
            font-weight: 700 !important;
        }

        /* Cards */
        .rc-card {
            border-radius: 20px !important;
            padding: 1rem 1.25rem !important;
            background-color: #ffffff !important;
            border: 1px solid #E0E5F2 !important;
            margin-bottom: 1rem !important;
        }

        .rc-page-header {
            margin-bottom: 1.25rem !important;
        }

        .rc-page-header .subtitle {
            color: #A3AED0 !important;
            font-size: 0.95rem !important;
        }

        .rc-section-caption {
            color: #A3AED0 !important;
            font-size: 0.9rem !important;
            margin-bottom: 0.75rem !important;
        }

        .rc-region-pill {
            display: inline-block;
            padding: 0.15rem 0.7rem;
            border-radius: 999px;
            background: #4318FF;
            color: #ffffff;
            font-size: 0.7rem;
            font-weight: 700;
            text-transform: uppercase;
        }

        [data-testid="stMetric"] {
            background: #ffffff;
            border-radius: 20px;
            padding: 0.75rem 1rem !important;
            border: 1px solid #E0E5F2;
        }
    </style>
    """
    st.markdown(css, unsafe_allow_html=True)


def region_pill(region: str) -> str:
    """HTML snippet for the region badge shown on recipe cards."""
    return f'<span class="rc-region-pill">{html.escape(region)}</span>'
