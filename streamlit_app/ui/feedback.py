"""
User-facing feedback for the admin pages.

Only two remote failures are ever shown to the user: a failed image upload
(explicit message) and a failed save (generic retry message). Fetch and
delete failures stay silent and only reach the logs.
"""

from contextlib import contextmanager
from typing import Optional
import streamlit as st


def show_error(message: str, hint: Optional[str] = None) -> None:
    """
    Display an error box with an optional hint line below it.

    Args:
        message: Text of the error
        hint: Optional caption telling the user what to do next
    """
    st.error(f"⚠️ {message}")
    if hint:
        st.caption(f"💡 {hint}")


def show_config_error() -> None:
    """Shown when the Record Store client could not be created."""
    show_error(
        "Record Store not configured.",
        hint="Set SUPABASE_URL and SUPABASE_ANON_KEY in the environment or in a .env file at the project root.",
    )


def show_upload_error(message: Optional[str]) -> None:
    """Blocking alert for a failed image upload; the previous image is kept."""
    show_error(message or "Upload error", hint="The previous image was kept. Try another file.")


def show_save_failed() -> None:
    """Generic failure affordance; the working copy stays open for a retry."""
    st.error("❌ Save failed. Please try again.")


def show_saved() -> None:
    st.success("✅ Saved")


def show_empty_state(title: str, subtitle: Optional[str] = None) -> None:
    """
    Display an informational placeholder when there is nothing to list.

    Args:
        title: Bold first line
        subtitle: Optional caption below it
    """
    st.info(f"📭 **{title}**")
    if subtitle:
        st.caption(subtitle)


@contextmanager
def working_spinner(label: str = "Working…"):
    """
    Spinner shown around a blocking Record Store call.

    Usage:
        with working_spinner("Saving…"):
            editor.save()
    """
    with st.spinner(label):
        yield
