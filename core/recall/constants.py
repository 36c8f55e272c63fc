"""
Recall Quiz Constants

Fixed timings, languages and the reference forgetting curve in one place.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final


# ---- Languages ----

class Language(str, Enum):
    """Language tag carried by every target and decoy word."""
    ENGLISH = "EN"   # Deep processing (native-like meaning)
    SWEDISH = "SV"   # Shallow processing (form only)


LANGUAGE_LABELS: Final[dict[Language, str]] = {
    Language.ENGLISH: "English",
    Language.SWEDISH: "Swedish",
}


# ---- Phase Timings (seconds) ----

STUDY_SECONDS: Final[int] = 30
DISTRACT_SECONDS: Final[int] = 300
TICK_SECONDS: Final[float] = 1.0


# ---- Reference Forgetting Curve ----

@dataclass(frozen=True)
class ReferencePoint:
    """One labelled point of the reference retention curve."""
    label: str
    elapsed_seconds: int
    retention: int  # percent


# Ebbinghaus-style savings at increasing delays
FORGETTING_CURVE: Final[tuple[ReferencePoint, ...]] = (
    ReferencePoint("0 min", 0, 100),
    ReferencePoint("5 min", 5 * 60, 58),
    ReferencePoint("20 min", 20 * 60, 44),
    ReferencePoint("1 hr", 60 * 60, 36),
    ReferencePoint("1 day", 24 * 60 * 60, 28),
    ReferencePoint("1 wk", 7 * 24 * 60 * 60, 23),
)
