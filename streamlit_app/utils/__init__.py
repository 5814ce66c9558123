"""
Utility modules for the Streamlit frontend.

This package contains:
- store_client: Shared Record Store client (one per process)
- state: Session state helpers for the catalog, the editor and the search box
"""
