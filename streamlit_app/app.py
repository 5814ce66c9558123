"""
Recipe Catalog CMS - Streamlit Frontend Main Entry Point.

This is the main Streamlit application entry point. It sets up the page
configuration, the sidebar shell and the Overview dashboard.

Note: Multi-page routing is handled automatically by Streamlit via the
`pages/` folder. The Catalogue page (list, filter, editor) lives there.

Run with:
    streamlit run streamlit_app/app.py
"""

import sys
from pathlib import Path

# Ensure the streamlit_app directory is in the Python path
# This allows imports to work regardless of how the app is run
streamlit_app_dir = Path(__file__).parent
if str(streamlit_app_dir) not in sys.path:
    sys.path.insert(0, str(streamlit_app_dir))

# Add project root to path so we can import recipe_catalog without installing it
project_root = streamlit_app_dir.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

# Import config early to load .env before anything reads the environment
from recipe_catalog.config import setup_logging

import streamlit as st

from recipe_catalog.metrics import count_by, recent_recipes, stat_cards, summarize_catalog
from utils.state import ensure_catalog_loaded
from utils.store_client import get_record_store
from ui.styles import load_global_styles, region_pill
from ui.layout import page_header, section, card, kpi_row, render_sidebar
from ui.charts import build_count_bar_chart
from ui.feedback import show_config_error, show_empty_state

setup_logging()

# Page configuration - must be called before any other Streamlit commands
st.set_page_config(
    page_title="Recipe Catalog CMS",
    page_icon="👨‍🍳",
    layout="wide",
    initial_sidebar_state="expanded"
)

load_global_styles()

store = get_record_store()
render_sidebar(store)

page_header(
    "Overview",
    subtitle="Gestion temps-réel du contenu du catalogue de recettes."
)

if store is None:
    show_config_error()
    st.stop()

catalog = ensure_catalog_loaded(store)
recipes = catalog.recipes

# Recomputed from the current set on every rerun
summary = summarize_catalog(recipes)
kpi_row(stat_cards(summary))

st.markdown("<br>", unsafe_allow_html=True)

if not recipes:
    show_empty_state(
        "No recipes yet",
        subtitle="Create the first dish from the Catalogue page.",
    )
    st.stop()

feed_col, charts_col = st.columns([2, 1], gap="medium")

with feed_col:
    section("Living Feed", caption="First entries of the catalogue (alphabetical order).")
    for recipe in recent_recipes(recipes):
        with card():
            img_col, text_col = st.columns([1, 4])
            with img_col:
                if recipe.image:
                    st.image(recipe.image, use_container_width=True)
                else:
                    st.markdown("🍲")
            with text_col:
                st.markdown(f"**{recipe.name or 'Sans nom'}**")
                st.markdown(region_pill(recipe.region), unsafe_allow_html=True)
                st.caption(f"{recipe.category} · {recipe.difficulty}")

with charts_col:
    section("Map Coverage")
    st.altair_chart(build_count_bar_chart(count_by(recipes, "region"), "Region"), use_container_width=True)

    section("Asset Groups")
    st.altair_chart(build_count_bar_chart(count_by(recipes, "category"), "Category"), use_container_width=True)
