"""
Static study material: the target list and the decoy list.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from core.recall.constants import Language


@dataclass(frozen=True)
class WordEntry:
    """
    A word the participant studies and should later recall.
    """
    text: str
    language: Language
    position: int  # 1-based order in the study list


@dataclass(frozen=True)
class DecoyEntry:
    """
    A plausible but unstudied word shown only in the recall grid.
    """
    text: str
    language: Language


EN = Language.ENGLISH
SV = Language.SWEDISH

TARGET_WORDS: tuple[WordEntry, ...] = (
    WordEntry("Apple", EN, 1),
    WordEntry("Hund", SV, 2),
    WordEntry("Memory", EN, 3),
    WordEntry("Blå", SV, 4),
    WordEntry("River", EN, 5),
    WordEntry("Stjärna", SV, 6),
    WordEntry("Garden", EN, 7),
    WordEntry("Flicka", SV, 8),
    WordEntry("Thunder", EN, 9),
    WordEntry("Skog", SV, 10),
    WordEntry("Candle", EN, 11),
    WordEntry("Snö", SV, 12),
    WordEntry("Journey", EN, 13),
    WordEntry("Fågel", SV, 14),
    WordEntry("Horizon", EN, 15),
)

DECOY_WORDS: tuple[DecoyEntry, ...] = (
    DecoyEntry("Forest", EN),
    DecoyEntry("Lampa", SV),
    DecoyEntry("Ocean", EN),
    DecoyEntry("Kärlekn", SV),
    DecoyEntry("Shadow", EN),
    DecoyEntry("Träd", SV),
    DecoyEntry("Flame", EN),
    DecoyEntry("Himmel", SV),
    DecoyEntry("Pebble", EN),
    DecoyEntry("Natt", SV),
)


def validate_word_lists(
    targets: Sequence[WordEntry],
    decoys: Sequence[DecoyEntry]
) -> None:
    """
    Reject word lists whose texts repeat or where a decoy shadows a target.

    Raises:
        ValueError: On duplicate texts within a list or any target/decoy overlap
    """
    target_texts = [w.text for w in targets]
    decoy_texts = [d.text for d in decoys]

    if len(set(target_texts)) != len(target_texts):
        raise ValueError("Target word list contains duplicate texts")
    if len(set(decoy_texts)) != len(decoy_texts):
        raise ValueError("Decoy word list contains duplicate texts")

    overlap = set(target_texts) & set(decoy_texts)
    if overlap:
        raise ValueError(f"Decoy words collide with targets: {sorted(overlap)}")
