"""
Shared Record Store client for the Streamlit app.

The Supabase client is created once per server process from environment
configuration and handed to every page that needs it. Pages never create
their own client.
"""

import logging
from typing import Optional

import streamlit as st

from recipe_catalog.store import RecordStore

logger = logging.getLogger(__name__)


@st.cache_resource
def get_record_store() -> Optional[RecordStore]:
    """
    Get the process-wide RecordStore.

    Returns:
        RecordStore instance, or None if SUPABASE_URL / SUPABASE_ANON_KEY are
        missing (the caller shows a configuration error instead of crashing).
    """
    try:
        return RecordStore.from_config()
    except RuntimeError as e:
        logger.error("Record Store is not configured: %s", e)
        return None


@st.cache_data(ttl=60)  # Cache for 60 seconds to avoid pinging on every rerun
def get_store_status(_store: RecordStore) -> bool:
    """
    Check whether the Record Store answers.

    Args:
        _store: RecordStore to ping (underscore: excluded from the cache key)

    Returns:
        True if reachable
    """
    return _store.ping()
