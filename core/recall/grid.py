"""
Recall grid construction and per-tile review state.

The grid is the shuffled union of targets and decoys. It is built once per
session and never reshuffled until the session is reset.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import AbstractSet, Optional, Sequence

from core.recall.constants import Language
from core.recall.word_lists import DecoyEntry, WordEntry


@dataclass(frozen=True)
class GridItem:
    """
    One tile in the recall grid.
    """
    text: str
    language: Language
    is_target: bool
    position: Optional[int] = None


class TileState(str, Enum):
    """Presentation state of a grid tile."""
    IDLE = "idle"
    SELECTED = "selected"
    CORRECT = "correct"
    MISS = "miss"
    FALSE_POSITIVE = "false-pos"


def build_grid_items(
    targets: Sequence[WordEntry],
    decoys: Sequence[DecoyEntry]
) -> list[GridItem]:
    """
    Tag targets and decoys as grid items, targets first, unshuffled.
    """
    items = [
        GridItem(text=w.text, language=w.language, is_target=True, position=w.position)
        for w in targets
    ]
    items.extend(
        GridItem(text=d.text, language=d.language, is_target=False)
        for d in decoys
    )
    return items


def fisher_yates(items: list, rng: random.Random) -> list:
    """
    Shuffle a list in place with a uniform Fisher–Yates permutation.
    """
    for i in range(len(items) - 1, 0, -1):
        j = rng.randint(0, i)
        items[i], items[j] = items[j], items[i]
    return items


def shuffle_grid(
    targets: Sequence[WordEntry],
    decoys: Sequence[DecoyEntry],
    rng: Optional[random.Random] = None
) -> tuple[GridItem, ...]:
    """
    Build the recall grid as a uniformly random permutation of all words.

    Args:
        targets: Studied words
        decoys: Unstudied distractor words
        rng: Random source; pass a seeded instance for a reproducible order

    Returns:
        Immutable grid order for one session
    """
    if rng is None:
        rng = random.Random()
    return tuple(fisher_yates(build_grid_items(targets, decoys), rng))


def get_tile_state(
    item: GridItem,
    selection: AbstractSet[str],
    submitted: bool
) -> TileState:
    """
    Classify a tile for rendering before and after submission.
    """
    is_selected = item.text in selection
    if not submitted:
        return TileState.SELECTED if is_selected else TileState.IDLE
    if item.is_target:
        return TileState.CORRECT if is_selected else TileState.MISS
    if is_selected:
        return TileState.FALSE_POSITIVE
    return TileState.IDLE  # correct rejection
