"""
Types for the results dashboard.
"""

from __future__ import annotations

from dataclasses import dataclass

import pandas as pd

from core.recall.constants import Language


@dataclass(frozen=True)
class ResultsDashboardData:
    """
    Precomputed KPI values and chart frames for one submission.
    """
    words_recalled_label: str
    total_recalled: int
    target_count: int
    retention_percentage: int
    recall_rate_by_language: dict[Language, int]
    false_positive_count: int
    serial_position_df: pd.DataFrame
    encoding_depth_df: pd.DataFrame
    forgetting_curve_df: pd.DataFrame
    selection_review_df: pd.DataFrame
