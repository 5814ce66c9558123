"""
Layout primitives for consistent page structure.

Provides reusable components for the sidebar shell, page headers, sections,
cards, and KPI rows.
"""

from contextlib import contextmanager
from typing import List, Optional
import streamlit as st

from recipe_catalog.store import RecordStore
from utils.store_client import get_store_status

CATALOGUE_PAGE = "pages/01_🍽_Catalogue.py"
OVERVIEW_PAGE = "app.py"


def render_sidebar(store: Optional[RecordStore]) -> None:
    """
    Render the navigation shell shared by every page.

    Args:
        store: Shared RecordStore, or None if not configured
    """
    with st.sidebar:
        st.markdown("### 👨‍🍳 **Recipe Catalog** CMS")

        st.divider()

        st.page_link(OVERVIEW_PAGE, label="Tableau de bord", icon="📊")
        st.page_link(CATALOGUE_PAGE, label="Gestion des Plats", icon="🍽")

        st.divider()

        with st.expander("System status", expanded=False):
            if store is None:
                st.markdown("**Record Store:** ⚪ not configured")
            else:
                online = get_store_status(store)
                status_emoji = "🟢" if online else "🔴"
                st.markdown(f"**Record Store:** {status_emoji}")
                st.caption(f"Table `{store.table}` · bucket `{store.bucket}`")

        # No authentication: the control is displayed but does nothing
        st.button("Déconnexion", key="sidebar_logout", use_container_width=True)


def page_header(title: str, subtitle: Optional[str] = None, right: Optional[callable] = None) -> None:
    """
    Render a consistent page header with title and optional subtitle.

    Args:
        title: Main page title
        subtitle: Optional subtitle/description text
        right: Optional callable that renders right-side content (e.g., buttons)
    """
    if right is not None:
        col_title, col_right = st.columns([3, 1])
        with col_title:
            _header_block(title, subtitle)
        with col_right:
            right()
    else:
        _header_block(title, subtitle)


def _header_block(title: str, subtitle: Optional[str]) -> None:
    st.markdown('<div class="rc-page-header">', unsafe_allow_html=True)
    st.markdown(f"# {title}")
    if subtitle:
        st.markdown(f'<div class="subtitle">{subtitle}</div>', unsafe_allow_html=True)
    st.markdown('</div>', unsafe_allow_html=True)


def kpi_row(kpis: list[dict]) -> None:
    """
    Render a row of KPI metrics.

    Args:
        kpis: List of dicts with keys:
            - label: KPI label text
            - value: KPI value (number or string)
            - delta: Optional delta/change indicator
            - icon: Optional emoji or icon prefix
    """
    cols = st.columns(len(kpis))
    for col, kpi in zip(cols, kpis):
        with col:
            label = kpi.get("label", "")
            icon = kpi.get("icon", "")
            display_label = f"{icon} {label}" if icon else label
            st.metric(
                label=display_label,
                value=kpi.get("value", ""),
                delta=kpi.get("delta", None),
                delta_color="off",
            )


def section(title: str, caption: Optional[str] = None) -> None:
    """
    Render a section header with optional caption.

    Args:
        title: Section title
        caption: Optional caption/help text below title
    """
    st.markdown(f"## {title}")
    if caption:
        st.markdown(f'<div class="rc-section-caption">{caption}</div>', unsafe_allow_html=True)


@contextmanager
def card(title: Optional[str] = None):
    """
    Context manager for a bordered card container.

    Usage:
        with card("Ingredients"):
            st.write("Card content")
    """
    with st.container(border=True):
        if title:
            st.markdown(f"### {title}")
        yield


def select_options(current: Optional[str], options: List[str]) -> List[str]:
    """
    Options for a selectbox bound to a stored value.

    A value outside the known set, including a blank one, is put first so
    the widget shows what is actually stored instead of options[0].
    """
    current = current or ""
    if current not in options:
        return [current] + list(options)
    return list(options)


def blank_label(value: str) -> str:
    """Selectbox format_func that shows an empty value as a dash."""
    return value or "—"
