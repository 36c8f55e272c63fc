"""
Word tile style presets and constants.
"""

from __future__ import annotations

from dataclasses import dataclass

from core.recall import Language, TileState


# ---- Palette ----

INDIGO = "#5548f5"
VIOLET = "#7c3aed"
ROSE = "#f43f5e"
TEAL = "#0d9488"
GREEN = "#16a34a"
MUTED = "#7874a1"
BORDER = "#dddaf0"

TIMER_WARNING_SECONDS = 8


@dataclass(frozen=True)
class TileStyle:
    """
    Visual preset for one tile state.
    """
    icon: str
    legend: str
    bg_color: str
    border_color: str
    text_color: str


TILE_STYLES: dict[TileState, TileStyle] = {
    TileState.IDLE: TileStyle("", "Correct Rejection", "#ffffff", BORDER, "#1a1730"),
    TileState.SELECTED: TileStyle("●", "Selected", "#ede9fe", INDIGO, INDIGO),
    TileState.CORRECT: TileStyle("✓", "Correct", "#dcfce7", "#86efac", GREEN),
    TileState.MISS: TileStyle("○", "Missed", "#fff7ed", "#fdba74", "#c2410c"),
    TileState.FALSE_POSITIVE: TileStyle("✗", "False Positive", "#fee2e2", "#fca5a5", ROSE),
}

REVIEW_LEGEND_ORDER = [
    TileState.CORRECT,
    TileState.MISS,
    TileState.FALSE_POSITIVE,
    TileState.IDLE,
]

LANGUAGE_COLORS: dict[Language, str] = {
    Language.ENGLISH: INDIGO,
    Language.SWEDISH: ROSE,
}
