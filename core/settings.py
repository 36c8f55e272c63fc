"""
Environment-driven settings for the recall quiz.

Values come from the process environment, optionally seeded from a local
.env file.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from core.recall.constants import DISTRACT_SECONDS, STUDY_SECONDS


load_dotenv()


@dataclass(frozen=True)
class QuizSettings:
    """
    Runtime configuration for one app process.
    """
    study_seconds: int = STUDY_SECONDS
    distract_seconds: int = DISTRACT_SECONDS
    shuffle_seed: Optional[int] = None
    log_level: str = "INFO"


def _read_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _read_positive_int(name: str, default: int) -> int:
    value = _read_int(name, default)
    if value <= 0:
        raise ValueError(f"{name} must be a positive number of seconds, got {value}")
    return value


def get_study_seconds() -> int:
    return _read_positive_int("RECALL_STUDY_SECONDS", STUDY_SECONDS)


def get_distract_seconds() -> int:
    return _read_positive_int("RECALL_DISTRACT_SECONDS", DISTRACT_SECONDS)


def get_shuffle_seed() -> Optional[int]:
    """
    Optional grid seed; unset means a fresh random order every session.
    """
    return _read_int("RECALL_SHUFFLE_SEED", None)


def get_log_level() -> str:
    level = os.getenv("RECALL_LOG_LEVEL", "INFO").strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"RECALL_LOG_LEVEL is not a logging level: {level!r}")
    return level


def load_settings() -> QuizSettings:
    """
    Read all quiz settings from the environment.

    Raises:
        ValueError: If any variable is set to an invalid value
    """
    return QuizSettings(
        study_seconds=get_study_seconds(),
        distract_seconds=get_distract_seconds(),
        shuffle_seed=get_shuffle_seed(),
        log_level=get_log_level(),
    )


def configure_logging(level: str = "INFO") -> None:
    """
    Configure root logging once for the app process.
    """
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
