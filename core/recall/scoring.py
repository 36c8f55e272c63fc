"""
Scoring - Recall statistics for a submitted selection.

Pure functions only; no controller or UI state is touched here.

Rates are rounded half-up with integer arithmetic: 8/15 -> 53, 1/2 -> 50.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import AbstractSet, Mapping, Optional, Sequence

from core.recall.constants import (
    DISTRACT_SECONDS,
    FORGETTING_CURVE,
    Language,
    ReferencePoint,
)
from core.recall.word_lists import WordEntry


@dataclass(frozen=True)
class RecalledWord:
    """Recall outcome for one target word."""
    text: str
    language: Language
    position: int
    recalled: bool


@dataclass(frozen=True)
class CurvePoint:
    """Reference retention at one delay, with the observed value if measured there."""
    label: str
    reference_retention: int
    observed_retention: Optional[int] = None


@dataclass(frozen=True)
class ScoreResult:
    """
    Statistics for one submission. Never patched; a new submission replaces it.
    """
    per_word_recalled: tuple[RecalledWord, ...]
    recall_rate_by_language: Mapping[Language, int]
    total_recalled: int
    retention_percentage: int
    false_positive_count: int
    forgetting_curve_points: tuple[CurvePoint, ...]


def percentage(part: int, whole: int) -> int:
    """
    Integer percentage rounded half-up; 0 when whole is 0.
    """
    if whole <= 0:
        return 0
    # round(100 * part / whole) with ties going up, in exact integer math
    return (200 * part + whole) // (2 * whole)


def nearest_curve_index(
    curve: Sequence[ReferencePoint],
    elapsed_seconds: int
) -> int:
    """
    Index of the reference point closest to the elapsed time (earliest on ties).
    """
    return min(
        range(len(curve)),
        key=lambda i: (abs(curve[i].elapsed_seconds - elapsed_seconds), i)
    )


def build_forgetting_curve(
    retention_percentage: int,
    distract_seconds: int = DISTRACT_SECONDS,
    curve: Sequence[ReferencePoint] = FORGETTING_CURVE
) -> tuple[CurvePoint, ...]:
    """
    Annotate the reference curve with the observed retention at one point.
    """
    if not curve:
        return ()
    observed_index = nearest_curve_index(curve, distract_seconds)
    return tuple(
        CurvePoint(
            label=point.label,
            reference_retention=point.retention,
            observed_retention=retention_percentage if i == observed_index else None,
        )
        for i, point in enumerate(curve)
    )


def score(
    targets: Sequence[WordEntry],
    selection: AbstractSet[str],
    distract_seconds: int = DISTRACT_SECONDS
) -> ScoreResult:
    """
    Score a selection against the target list.

    Total over its inputs: the selection may be empty, partial, or contain
    words that are not targets (those count as false positives).

    Args:
        targets: Studied words in list order
        selection: Word texts the participant picked
        distract_seconds: Actual distraction delay, used to place the observed
            retention on the reference curve

    Returns:
        ScoreResult for this submission
    """
    per_word = tuple(
        RecalledWord(
            text=w.text,
            language=w.language,
            position=w.position,
            recalled=w.text in selection,
        )
        for w in targets
    )

    target_texts = {w.text for w in targets}
    false_positive_count = sum(1 for text in selection if text not in target_texts)

    rates: dict[Language, int] = {}
    for language in Language:
        partition = [w for w in per_word if w.language == language]
        recalled_count = sum(1 for w in partition if w.recalled)
        rates[language] = percentage(recalled_count, len(partition))

    total_recalled = sum(1 for w in per_word if w.recalled)
    retention = percentage(total_recalled, len(per_word))

    return ScoreResult(
        per_word_recalled=per_word,
        recall_rate_by_language=MappingProxyType(rates),
        total_recalled=total_recalled,
        retention_percentage=retention,
        false_positive_count=false_positive_count,
        forgetting_curve_points=build_forgetting_curve(retention, distract_seconds),
    )
