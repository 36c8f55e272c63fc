"""
Study page rendering.
"""

from __future__ import annotations

import streamlit as st

from app.ui import render_timer_badge, schedule_next_tick
from app.ui.tile_style import INDIGO, LANGUAGE_COLORS, ROSE, TIMER_WARNING_SECONDS
from core.recall import Phase, PhaseController


STUDY_COLUMNS = 3


def render_study_page(controller: PhaseController) -> None:
    """
    Render the target list with the study countdown.
    """
    controller.sync()
    if controller.phase != Phase.STUDY:
        st.rerun()

    col_timer, col_skip = st.columns([4, 1])
    with col_timer:
        color = ROSE if controller.timer < TIMER_WARNING_SECONDS else INDIGO
        render_timer_badge(controller.timer, color)
    with col_skip:
        if st.button("Skip →", use_container_width=True):
            controller.skip()
            st.rerun()

    st.subheader("Memorise these words")
    st.caption("Read carefully. You'll need to pick them out from a grid including decoys.")

    columns = st.columns(STUDY_COLUMNS)
    for i, word in enumerate(controller.targets):
        with columns[i % STUDY_COLUMNS]:
            badge_color = LANGUAGE_COLORS[word.language]
            st.markdown(
                f"**{word.position}.** {word.text} "
                f"<span style='color:{badge_color}; font-size:0.75em; font-weight:800;'>"
                f"{word.language.value}</span>",
                unsafe_allow_html=True
            )

    schedule_next_tick(controller)
