"""
Streamlit session state and settings helpers.
"""

from __future__ import annotations

import streamlit as st

from core.recall import PhaseController
from core.settings import QuizSettings, configure_logging, load_settings


def get_settings() -> QuizSettings:
    """
    Load settings and configure logging (cached per Streamlit process).
    """
    @st.cache_resource
    def _load_settings() -> QuizSettings:
        settings = load_settings()
        configure_logging(settings.log_level)
        return settings

    return _load_settings()


def ensure_session_state() -> None:
    """
    Populate Streamlit session_state with one quiz controller per browser session.
    """
    if "controller" not in st.session_state:
        st.session_state.controller = PhaseController.from_settings(get_settings())


def get_controller() -> PhaseController:
    return st.session_state.controller
