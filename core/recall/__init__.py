"""
Recall - Timed free-recall memory quiz

Participants study a word list, sit through a distraction interval, then pick
the studied words out of a shuffled grid that also holds decoys.

Quick start:
    from core import recall

    controller = recall.PhaseController()
    controller.start()          # intro -> study
    controller.sync()           # deliver due countdown ticks
    controller.toggle_selection("Apple")
    controller.submit()         # recall -> results
    controller.scores.retention_percentage
"""

# State machine
from core.recall.controller import Phase, PhaseController, TIMED_PHASES

# Scoring
from core.recall.scoring import (
    CurvePoint,
    RecalledWord,
    ScoreResult,
    percentage,
    score,
)

# Grid
from core.recall.grid import GridItem, TileState, get_tile_state, shuffle_grid

# Word lists
from core.recall.word_lists import (
    DECOY_WORDS,
    TARGET_WORDS,
    DecoyEntry,
    WordEntry,
    validate_word_lists,
)

# Constants
from core.recall.constants import (
    DISTRACT_SECONDS,
    FORGETTING_CURVE,
    LANGUAGE_LABELS,
    STUDY_SECONDS,
    Language,
)

__all__ = [
    "Phase",
    "PhaseController",
    "TIMED_PHASES",
    "CurvePoint",
    "RecalledWord",
    "ScoreResult",
    "percentage",
    "score",
    "GridItem",
    "TileState",
    "get_tile_state",
    "shuffle_grid",
    "DECOY_WORDS",
    "TARGET_WORDS",
    "DecoyEntry",
    "WordEntry",
    "validate_word_lists",
    "DISTRACT_SECONDS",
    "FORGETTING_CURVE",
    "LANGUAGE_LABELS",
    "STUDY_SECONDS",
    "Language",
]
