"""
Frame builders for the results dashboard charts.
"""

from __future__ import annotations

from typing import AbstractSet, Mapping, Sequence

import pandas as pd

from core.analytics.constants import (
    ENCODING_DEPTH_COLUMNS,
    FORGETTING_CURVE_COLUMNS,
    MISSED_VALUE,
    RECALLED_VALUE,
    SELECTION_REVIEW_COLUMNS,
    SERIAL_POSITION_COLUMNS,
)
from core.recall.constants import LANGUAGE_LABELS, Language
from core.recall.grid import GridItem, get_tile_state
from core.recall.scoring import CurvePoint, RecalledWord


def build_serial_position_df(per_word: Sequence[RecalledWord]) -> pd.DataFrame:
    """
    Recall (100/0) by study-list position.
    """
    if not per_word:
        return pd.DataFrame(columns=SERIAL_POSITION_COLUMNS)

    df = pd.DataFrame(
        [
            {
                "position": w.position,
                "word": w.text,
                "recalled": RECALLED_VALUE if w.recalled else MISSED_VALUE,
            }
            for w in per_word
        ],
        columns=SERIAL_POSITION_COLUMNS,
    )
    return df.sort_values("position").reset_index(drop=True)


def build_encoding_depth_df(rates: Mapping[Language, int]) -> pd.DataFrame:
    """
    Recall rate per language, in Language order.
    """
    return pd.DataFrame(
        [
            {"language": LANGUAGE_LABELS[language], "rate": int(rates.get(language, 0))}
            for language in Language
        ],
        columns=ENCODING_DEPTH_COLUMNS,
    )


def build_forgetting_curve_df(points: Sequence[CurvePoint]) -> pd.DataFrame:
    """
    Reference retention with the observed retention at its one annotated point.
    """
    if not points:
        return pd.DataFrame(columns=FORGETTING_CURVE_COLUMNS)

    return pd.DataFrame(
        [
            {
                "label": p.label,
                "reference": float(p.reference_retention),
                "observed": p.observed_retention,
            }
            for p in points
        ],
        columns=FORGETTING_CURVE_COLUMNS,
    ).astype({"reference": "float64", "observed": "float64"})


def build_selection_review_df(
    grid: Sequence[GridItem],
    selection: AbstractSet[str]
) -> pd.DataFrame:
    """
    Submitted tile state for every grid item, in grid order.
    """
    if not grid:
        return pd.DataFrame(columns=SELECTION_REVIEW_COLUMNS)

    return pd.DataFrame(
        [
            {
                "word": item.text,
                "language": item.language.value,
                "is_target": item.is_target,
                "state": get_tile_state(item, selection, submitted=True).value,
            }
            for item in grid
        ],
        columns=SELECTION_REVIEW_COLUMNS,
    )
