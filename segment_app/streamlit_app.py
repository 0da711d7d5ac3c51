"""
Segment Composer - Main App

Streamlit entry point: compose a named segment from the schema catalog and
send it to the configured webhook.
"""

import streamlit as st

from segment_app.state import ensure_session_state, get_settings
from segment_app.ui import render_segment_panel


# ---- Page Setup ----

st.set_page_config(
    page_title="Segment Composer",
    layout="centered"
)


# ---- Main App ----

def main():
    """Main app entry point."""
    get_settings()
    ensure_session_state()
    render_segment_panel()


if __name__ == "__main__":
    main()
