"""
Results page rendering.
"""

from __future__ import annotations

import streamlit as st

from app.ui import render_results_metrics, render_review_grid
from core.analytics import (
    PRIMACY_MARKER_POSITION,
    RECENCY_MARKER_POSITION,
    build_results_dashboard,
)
from core.recall import PhaseController


def render_results_page(controller: PhaseController) -> None:
    """
    Render KPIs, the selection review and the three result charts.
    """
    scores = controller.scores
    if scores is None:
        controller.reset()
        st.rerun()

    if st.button("← Home"):
        controller.reset()
        st.rerun()

    st.title("📊 Your Results")
    dashboard = build_results_dashboard(scores, controller.grid, controller.selection)
    render_results_metrics(dashboard)

    st.markdown("### Selection Review")
    render_review_grid(controller)

    st.markdown("### 1 - Serial Position Curve")
    st.caption(
        f"Recall by word position. Look for the primacy effect around position "
        f"{PRIMACY_MARKER_POSITION} and the recency effect around position "
        f"{RECENCY_MARKER_POSITION}."
    )
    st.area_chart(dashboard.serial_position_df.set_index("position")[["recalled"]])

    st.markdown("### 2 - Encoding Depth")
    st.caption("Deep processing (English) vs shallow processing (Swedish).")
    st.bar_chart(dashboard.encoding_depth_df.set_index("language"))

    st.markdown("### 3 - Forgetting Curve")
    st.caption("Ebbinghaus reference retention compared with your score.")
    st.line_chart(dashboard.forgetting_curve_df.set_index("label"))

    if st.button("↺ Run Again", type="primary", use_container_width=True):
        controller.reset()
        st.rerun()
