"""
Distraction page rendering.
"""

from __future__ import annotations

import streamlit as st

from app.ui import render_timer_badge, schedule_next_tick
from app.ui.tile_style import TEAL
from core.recall import Phase, PhaseController


TOPICS = ["Primacy Effect", "Recency Effect", "Shallow Processing", "Storage Decay"]


def render_distract_page(controller: PhaseController) -> None:
    """
    Render the distraction countdown.
    """
    controller.sync()
    if controller.phase != Phase.DISTRACT:
        st.rerun()

    col_timer, col_skip = st.columns([4, 1])
    with col_timer:
        render_timer_badge(controller.timer, TEAL)
    with col_skip:
        if st.button("Skip →", use_container_width=True):
            controller.skip()
            st.rerun()

    st.subheader("Distraction Phase")
    st.caption(
        "Look away. The recall test begins automatically: "
        "you'll pick words from a shuffled grid including decoys."
    )
    st.markdown(" · ".join(f"`{topic}`" for topic in TOPICS))

    schedule_next_tick(controller)
