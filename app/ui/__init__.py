"""UI Components for the Free Recall Dashboard"""

from app.ui.session_stats import render_results_metrics, render_selection_counter
from app.ui.timer_badge import format_clock, render_timer_badge, schedule_next_tick
from app.ui.word_tile import render_recall_grid, render_review_grid

__all__ = [
    "render_results_metrics",
    "render_selection_counter",
    "format_clock",
    "render_timer_badge",
    "schedule_next_tick",
    "render_recall_grid",
    "render_review_grid",
]
