"""
Tests for the Streamlit session state helpers.

st.session_state is patched with a plain dict so the helpers can run outside
a Streamlit script.
"""

from unittest.mock import patch

import pytest

from recipe_catalog.catalog import Catalog
from recipe_catalog.editor import RecipeEditor
from utils import state


@pytest.fixture
def session():
    fake_session = {}
    with patch.object(state.st, "session_state", fake_session):
        yield fake_session


class TestCatalogState:
    """Test get_catalog() and ensure_catalog_loaded()."""

    def test_catalog_created_once(self, session, fake_store):
        first = state.get_catalog(fake_store)
        second = state.get_catalog(fake_store)

        assert isinstance(first, Catalog)
        assert first is second
        assert session[state.CATALOG_KEY] is first

    def test_get_catalog_does_not_fetch(self, session, fake_store):
        state.get_catalog(fake_store)
        assert fake_store.list_calls == 0

    def test_ensure_loaded_fetches_once(self, session, fake_store):
        catalog = state.ensure_catalog_loaded(fake_store)
        state.ensure_catalog_loaded(fake_store)

        assert fake_store.list_calls == 1
        assert len(catalog) == 2

    def test_failed_first_fetch_not_retried_on_rerun(self, session, fake_store):
        fake_store.fail_list = True

        catalog = state.ensure_catalog_loaded(fake_store)
        state.ensure_catalog_loaded(fake_store)

        assert fake_store.list_calls == 1
        assert catalog.loaded is False
        assert len(catalog) == 0


class TestEditorState:
    """Test get_editor()."""

    def test_editor_created_once(self, session, fake_store):
        editor = state.get_editor(fake_store)

        assert isinstance(editor, RecipeEditor)
        assert state.get_editor(fake_store) is editor

    def test_save_refreshes_session_catalog(self, session, fake_store):
        """Test the editor's save is followed by a re-fetch of the same catalog."""
        catalog = state.ensure_catalog_loaded(fake_store)
        editor = state.get_editor(fake_store)

        editor.open()
        editor.set_field("name", "Ablo")
        assert editor.save() is True

        assert fake_store.list_calls == 2
        assert "Ablo" in [r.name for r in catalog.recipes]


class TestSearchQuery:
    """Test the search box helpers."""

    def test_default_is_empty(self, session):
        assert state.get_search_query() == ""

    def test_set_and_get(self, session):
        state.set_search_query("sud")

        assert state.get_search_query() == "sud"
        assert session[state.SEARCH_QUERY_KEY] == "sud"

    def test_none_clears(self, session):
        state.set_search_query("nord")
        state.set_search_query(None)
        assert state.get_search_query() == ""
