"""
Free Recall Dashboard - Main App

Streamlit UI for the timed free-recall memory experiment.
"""

import streamlit as st

from app.router import render_current_phase
from app.state import ensure_session_state, get_controller


# ---- Page Setup ----

st.set_page_config(
    page_title="Free Recall Dashboard",
    page_icon="🧠",
    layout="centered"
)


# ---- Session State Initialization ----

ensure_session_state()


# ---- Render ----

render_current_phase(get_controller())
