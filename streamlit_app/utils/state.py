"""
Session State Management Module.

This module wraps Streamlit's session_state to keep one Catalog and one
RecipeEditor per browser session. Both receive the shared RecordStore
explicitly; the editor's on_saved hook is the catalog's fetch_all, so every
successful save is followed by a full re-fetch.

# NOTE: session_state only lives for the current Streamlit session. A page
    refresh starts from an empty catalog and a closed editor.
"""

from typing import Optional

import streamlit as st

from recipe_catalog.catalog import Catalog
from recipe_catalog.editor import RecipeEditor
from recipe_catalog.store import RecordStore

# Session state keys
CATALOG_KEY = "catalog"
EDITOR_KEY = "recipe_editor"
SEARCH_QUERY_KEY = "catalog_search_query"


def get_catalog(store: RecordStore) -> Catalog:
    """
    Get the session's Catalog, creating it on first use.

    Args:
        store: Shared RecordStore

    Returns:
        Catalog instance (not fetched yet on first call)
    """
    if CATALOG_KEY not in st.session_state:
        st.session_state[CATALOG_KEY] = Catalog(store)
    return st.session_state[CATALOG_KEY]


def ensure_catalog_loaded(store: RecordStore) -> Catalog:
    """
    Get the session's Catalog and fetch it once if it was never loaded.

    A failed first fetch is not retried automatically on every rerun; the
    Catalogue page offers a refresh button for that.
    """
    catalog = get_catalog(store)
    if not catalog.loaded and catalog.last_error is None:
        catalog.fetch_all()
    return catalog


def get_editor(store: RecordStore) -> RecipeEditor:
    """
    Get the session's RecipeEditor, creating it on first use.

    Args:
        store: Shared RecordStore

    Returns:
        RecipeEditor wired to re-fetch the session's Catalog after a save
    """
    if EDITOR_KEY not in st.session_state:
        catalog = get_catalog(store)
        st.session_state[EDITOR_KEY] = RecipeEditor(store, on_saved=catalog.fetch_all)
    return st.session_state[EDITOR_KEY]


def get_search_query() -> str:
    """Current catalogue search text ("" if never set)."""
    return st.session_state.get(SEARCH_QUERY_KEY) or ""


def set_search_query(query: Optional[str]) -> None:
    """Store the catalogue search text."""
    st.session_state[SEARCH_QUERY_KEY] = query or ""
