"""
Results Statistics UI

Renders the KPI row for a submission.
"""

import streamlit as st

from core.analytics import ResultsDashboardData
from core.recall import LANGUAGE_LABELS, Language


def render_results_metrics(dashboard: ResultsDashboardData) -> None:
    """
    Render recalled count, retention, per-language recall and false positives.
    """
    columns = st.columns(3 + len(Language))

    with columns[0]:
        st.metric("Words Recalled", dashboard.words_recalled_label)
    with columns[1]:
        st.metric("Retention", f"{dashboard.retention_percentage}%")

    for column, language in zip(columns[2:], Language):
        with column:
            rate = dashboard.recall_rate_by_language.get(language, 0)
            st.metric(f"{LANGUAGE_LABELS[language]} Recall", f"{rate}%")

    with columns[-1]:
        st.metric("False Positives", dashboard.false_positive_count)


def render_selection_counter(selected: int, cap: int) -> None:
    """Render the "n / cap selected" counter with a cap warning."""
    text = f"**{selected}** / {cap} selected"
    if selected >= cap:
        text += " · :red[**Max reached**]"
    st.markdown(text)
