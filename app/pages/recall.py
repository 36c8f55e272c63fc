"""
Recall page rendering.
"""

from __future__ import annotations

import streamlit as st

from app.ui import render_recall_grid, render_selection_counter
from core.recall import PhaseController


def render_recall_page(controller: PhaseController) -> None:
    st.subheader("Free Recall Test")
    st.caption(
        f"Select the {controller.selection_cap} words you studied. "
        f"Some of these words were never on the list."
    )

    clicked = render_recall_grid(controller)
    if clicked is not None:
        controller.toggle_selection(clicked)
        st.rerun()

    col_count, col_submit = st.columns([3, 1])
    with col_count:
        render_selection_counter(len(controller.selection), controller.selection_cap)
    with col_submit:
        if st.button(
            "Submit →",
            type="primary",
            disabled=not controller.can_submit,
            use_container_width=True,
        ):
            controller.submit()
            st.rerun()
