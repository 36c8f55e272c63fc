"""
Phase Controller - Recall quiz state machine

Owns all mutable quiz state for one participant session:
phase, countdown, recall grid, selection set and score result.

Phases:
    intro -> study -> distract -> recall -> results -> (reset) intro

Study and distract run on a countdown and advance automatically when it
reaches zero; they can also be skipped by the user. Every operation returns
True if it changed state and False if it was an inert no-op.
"""

from __future__ import annotations

import logging
import random
import time
from enum import Enum
from typing import TYPE_CHECKING, Callable, Optional, Sequence

from core.recall.constants import DISTRACT_SECONDS, STUDY_SECONDS
from core.recall.countdown import Countdown
from core.recall.grid import GridItem, TileState, get_tile_state, shuffle_grid
from core.recall.scoring import ScoreResult, score
from core.recall.word_lists import (
    DECOY_WORDS,
    TARGET_WORDS,
    DecoyEntry,
    WordEntry,
    validate_word_lists,
)

if TYPE_CHECKING:
    from core.settings import QuizSettings


logger = logging.getLogger(__name__)


class Phase(str, Enum):
    """Quiz phase."""
    INTRO = "intro"
    STUDY = "study"
    DISTRACT = "distract"
    RECALL = "recall"
    RESULTS = "results"


TIMED_PHASES = frozenset({Phase.STUDY, Phase.DISTRACT})

Listener = Callable[["PhaseController"], None]


class PhaseController:
    """
    Single-owner state machine for one recall quiz session.

    The rendering layer reads `phase`, `timer`, `grid`, `selection`,
    `submitted` and `scores`, and drives the quiz through `start()`,
    `skip()`, `toggle_selection()`, `submit()`, `reset()` and `sync()`.
    """

    def __init__(
        self,
        targets: Sequence[WordEntry] = TARGET_WORDS,
        decoys: Sequence[DecoyEntry] = DECOY_WORDS,
        study_seconds: int = STUDY_SECONDS,
        distract_seconds: int = DISTRACT_SECONDS,
        seed: Optional[int] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Args:
            targets: Words to study
            decoys: Unstudied words mixed into the recall grid
            study_seconds: Study countdown length
            distract_seconds: Distraction countdown length
            seed: Optional seed for reproducible grid shuffles
            clock: Monotonic clock in seconds (injectable for tests)

        Raises:
            ValueError: If the word lists overlap or a duration is not positive
        """
        validate_word_lists(targets, decoys)
        if study_seconds <= 0 or distract_seconds <= 0:
            raise ValueError("Countdown durations must be positive")

        self.targets: tuple[WordEntry, ...] = tuple(targets)
        self.decoys: tuple[DecoyEntry, ...] = tuple(decoys)
        self.study_seconds = study_seconds
        self.distract_seconds = distract_seconds
        self._clock = clock
        self._rng = random.Random(seed)

        self._phase = Phase.INTRO
        self._countdown: Optional[Countdown] = None
        self._timer_generation = 0
        self._grid: tuple[GridItem, ...] = ()
        self._selection: set[str] = set()
        self._submitted = False
        self._scores: Optional[ScoreResult] = None
        self._listeners: list[Listener] = []

    @classmethod
    def from_settings(
        cls,
        settings: QuizSettings,
        clock: Callable[[], float] = time.monotonic
    ) -> "PhaseController":
        """
        Build a controller from environment-loaded quiz settings.
        """
        return cls(
            study_seconds=settings.study_seconds,
            distract_seconds=settings.distract_seconds,
            seed=settings.shuffle_seed,
            clock=clock,
        )

    # ---- Read-only state ----

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def timer(self) -> int:
        """Remaining seconds of the active countdown (0 when none is running)."""
        return self._countdown.remaining if self._countdown is not None else 0

    @property
    def timer_token(self) -> Optional[int]:
        return self._countdown.token if self._countdown is not None else None

    @property
    def grid(self) -> tuple[GridItem, ...]:
        return self._grid

    @property
    def selection(self) -> frozenset[str]:
        return frozenset(self._selection)

    @property
    def submitted(self) -> bool:
        return self._submitted

    @property
    def scores(self) -> Optional[ScoreResult]:
        return self._scores

    @property
    def selection_cap(self) -> int:
        return len(self.targets)

    @property
    def is_at_cap(self) -> bool:
        return len(self._selection) >= self.selection_cap

    @property
    def can_submit(self) -> bool:
        return self._phase == Phase.RECALL and not self._submitted and bool(self._selection)

    def tile_state(self, item: GridItem) -> TileState:
        return get_tile_state(item, self._selection, self._submitted)

    def seconds_until_next_tick(self, now: Optional[float] = None) -> Optional[float]:
        """
        Delay until the next tick falls due, or None when no countdown runs.
        """
        if self._countdown is None:
            return None
        now = self._clock() if now is None else now
        return self._countdown.seconds_until_next_tick(now)

    # ---- Change notification ----

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a callback invoked after every state change.

        Returns:
            Callable that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    # ---- Countdown management ----

    def _arm_countdown(self, seconds: int, anchor: float) -> None:
        self._timer_generation += 1
        self._countdown = Countdown.arm(self._timer_generation, seconds, anchor)

    def _cancel_countdown(self) -> None:
        self._timer_generation += 1
        self._countdown = None

    def _advance_timed_phase(self, anchor: float) -> None:
        if self._phase == Phase.STUDY:
            self._phase = Phase.DISTRACT
            self._arm_countdown(self.distract_seconds, anchor)
        elif self._phase == Phase.DISTRACT:
            self._phase = Phase.RECALL
            self._cancel_countdown()
        logger.info("Phase advanced to %s", self._phase.value)

    # ---- Operations ----

    def start(self) -> bool:
        """
        intro -> study. Arms the study countdown and fixes the session grid.
        """
        if self._phase != Phase.INTRO:
            logger.debug("start() ignored in phase %s", self._phase.value)
            return False

        if not self._grid:
            self._grid = shuffle_grid(self.targets, self.decoys, self._rng)
        self._phase = Phase.STUDY
        self._arm_countdown(self.study_seconds, self._clock())
        logger.info(
            "Session started: %d targets, %d decoys, study %ds",
            len(self.targets), len(self.decoys), self.study_seconds
        )
        self._notify()
        return True

    def tick(self, token: Optional[int] = None) -> bool:
        """
        Deliver one countdown tick.

        The tick that brings the countdown to zero also performs the phase
        transition, so a timed phase is never observed with 0 seconds left.

        Args:
            token: Token of the countdown the tick was scheduled for. A tick
                for a cancelled or replaced countdown is ignored.
        """
        countdown = self._countdown
        if self._phase not in TIMED_PHASES or countdown is None:
            logger.debug("Tick ignored in phase %s", self._phase.value)
            return False
        if token is not None and token != countdown.token:
            logger.debug("Stale tick ignored (token %s, current %s)", token, countdown.token)
            return False

        countdown.consume_tick()
        if countdown.expired:
            self._advance_timed_phase(anchor=countdown.deadline)
        self._notify()
        return True

    def sync(self, now: Optional[float] = None) -> int:
        """
        Deliver every tick that is due at clock reading `now`.

        Overshoot past the study deadline carries into the distract countdown.

        Returns:
            Number of ticks delivered
        """
        now = self._clock() if now is None else now
        delivered = 0
        while self._countdown is not None and self._countdown.due_ticks(now) > 0:
            if not self.tick(self._countdown.token):
                break
            delivered += 1
        return delivered

    def skip(self) -> bool:
        """
        User-triggered early exit from study or distract.
        """
        if self._phase not in TIMED_PHASES:
            logger.debug("skip() ignored in phase %s", self._phase.value)
            return False
        self._advance_timed_phase(anchor=self._clock())
        self._notify()
        return True

    def toggle_selection(self, word: str) -> bool:
        """
        Flip a word in the selection set during recall.

        Adding beyond the target count is silently ignored.
        """
        if self._phase != Phase.RECALL or self._submitted:
            logger.debug("toggle_selection(%r) ignored in phase %s", word, self._phase.value)
            return False

        if word in self._selection:
            self._selection.remove(word)
        elif self.is_at_cap:
            logger.debug("Selection cap %d reached; %r not added", self.selection_cap, word)
            return False
        else:
            self._selection.add(word)
        self._notify()
        return True

    def submit(self) -> bool:
        """
        recall -> results. Scores the current selection.

        An empty selection is ignored and the phase stays at recall.
        """
        if not self.can_submit:
            logger.debug(
                "submit() ignored (phase %s, %d selected)",
                self._phase.value, len(self._selection)
            )
            return False

        self._scores = score(self.targets, frozenset(self._selection), self.distract_seconds)
        self._submitted = True
        self._phase = Phase.RESULTS
        self._cancel_countdown()
        logger.info(
            "Submitted: %d/%d recalled, %d false positives",
            self._scores.total_recalled, len(self.targets), self._scores.false_positive_count
        )
        self._notify()
        return True

    def reset(self) -> bool:
        """
        Return to intro from any phase, discarding the session.

        The next start() shuffles a new grid.
        """
        self._cancel_countdown()
        self._selection.clear()
        self._scores = None
        self._submitted = False
        self._grid = ()
        self._phase = Phase.INTRO
        logger.info("Session reset")
        self._notify()
        return True
