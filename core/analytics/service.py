"""
Service layer to assemble the results dashboard for a submission.
"""

from __future__ import annotations

from typing import AbstractSet, Sequence

from core.analytics.metrics import (
    build_encoding_depth_df,
    build_forgetting_curve_df,
    build_selection_review_df,
    build_serial_position_df,
)
from core.analytics.types import ResultsDashboardData
from core.recall.grid import GridItem
from core.recall.scoring import ScoreResult


def build_results_dashboard(
    scores: ScoreResult,
    grid: Sequence[GridItem],
    selection: AbstractSet[str]
) -> ResultsDashboardData:
    """
    Build all KPI values and frames needed by the results page.
    """
    target_count = len(scores.per_word_recalled)

    return ResultsDashboardData(
        words_recalled_label=f"{scores.total_recalled}/{target_count}",
        total_recalled=scores.total_recalled,
        target_count=target_count,
        retention_percentage=scores.retention_percentage,
        recall_rate_by_language=dict(scores.recall_rate_by_language),
        false_positive_count=scores.false_positive_count,
        serial_position_df=build_serial_position_df(scores.per_word_recalled),
        encoding_depth_df=build_encoding_depth_df(scores.recall_rate_by_language),
        forgetting_curve_df=build_forgetting_curve_df(scores.forgetting_curve_points),
        selection_review_df=build_selection_review_df(grid, selection),
    )
