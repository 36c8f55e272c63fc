"""
Analytics package exports.
"""

from core.analytics.constants import PRIMACY_MARKER_POSITION, RECENCY_MARKER_POSITION
from core.analytics.service import build_results_dashboard
from core.analytics.types import ResultsDashboardData

__all__ = [
    "PRIMACY_MARKER_POSITION",
    "RECENCY_MARKER_POSITION",
    "build_results_dashboard",
    "ResultsDashboardData",
]
