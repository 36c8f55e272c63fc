"""
Intro page rendering.
"""

from __future__ import annotations

import streamlit as st

from app.ui import format_clock
from core.recall import PhaseController


def render_intro_page(controller: PhaseController) -> None:
    st.title("🧠 Free Recall Dashboard")
    st.markdown(
        f"A live memory experiment. Study a word list, wait "
        f"{format_clock(controller.distract_seconds)}, then identify the words "
        f"from a mixed grid, decoys included."
    )

    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("📖 Study", format_clock(controller.study_seconds))
    with col2:
        st.metric("⏳ Wait", format_clock(controller.distract_seconds))
    with col3:
        st.metric("🎯 Identify", f"{len(controller.targets)} words")

    if st.button("Begin Experiment →", type="primary", use_container_width=True):
        controller.start()
        st.rerun()
