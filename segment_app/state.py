"""
Streamlit session state and shared resource helpers.
"""

from __future__ import annotations

import streamlit as st

from segment_core import (
    Catalog,
    SegmentComposer,
    SubmitController,
    WebhookSink,
    resolve_catalog,
)
from segment_core.config import Settings, load_settings
from segment_core.logger import setup_logging


@st.cache_resource
def get_settings() -> Settings:
    """
    Load settings and configure logging (cached per server process).
    """
    settings = load_settings()
    setup_logging(settings.log_level)
    return settings


@st.cache_resource
def get_catalog() -> Catalog:
    return resolve_catalog(get_settings().catalog_path)


def _build_composer() -> SegmentComposer:
    settings = get_settings()
    controller = SubmitController(WebhookSink(settings.webhook_url))
    return SegmentComposer(catalog=get_catalog(), controller=controller)


def ensure_session_state() -> None:
    """
    Populate Streamlit session_state with defaults.
    """
    if "composer" not in st.session_state:
        st.session_state.composer = _build_composer()
    if "last_submitted" not in st.session_state:
        st.session_state.last_submitted = None


def get_composer() -> SegmentComposer:
    ensure_session_state()
    return st.session_state.composer
