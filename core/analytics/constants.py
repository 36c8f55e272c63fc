"""
Constants for the results dashboard charts.
"""

from __future__ import annotations

from typing import Final


# Reference lines on the serial position chart
PRIMACY_MARKER_POSITION: Final[int] = 3
RECENCY_MARKER_POSITION: Final[int] = 13

RECALLED_VALUE: Final[int] = 100
MISSED_VALUE: Final[int] = 0

SERIAL_POSITION_COLUMNS: Final[list[str]] = ["position", "word", "recalled"]
ENCODING_DEPTH_COLUMNS: Final[list[str]] = ["language", "rate"]
FORGETTING_CURVE_COLUMNS: Final[list[str]] = ["label", "reference", "observed"]
SELECTION_REVIEW_COLUMNS: Final[list[str]] = ["word", "language", "is_target", "state"]
