"""
Countdown - Wall-clock anchored one-second ticker.

A countdown is anchored to a monotonic clock reading. Ticks are derived from
elapsed time, not from how often the caller happens to poll, so a slow render
loop catches up with exactly the ticks it missed.

Each armed countdown carries a token. The owner invalidates a countdown by
arming a new one or dropping it; ticks presenting an old token are ignored.
"""

from __future__ import annotations

from dataclasses import dataclass

from core.recall.constants import TICK_SECONDS


@dataclass
class Countdown:
    """
    Remaining time for one timed phase.
    """
    token: int
    duration: int  # whole ticks
    anchor: float  # clock reading when the countdown was armed
    remaining: int
    ticks_delivered: int = 0
    tick_seconds: float = TICK_SECONDS

    @classmethod
    def arm(cls, token: int, duration: int, anchor: float) -> "Countdown":
        return cls(token=token, duration=duration, anchor=anchor, remaining=duration)

    @property
    def deadline(self) -> float:
        """Clock reading at which the final tick falls due."""
        return self.anchor + self.duration * self.tick_seconds

    @property
    def expired(self) -> bool:
        return self.remaining <= 0

    def due_ticks(self, now: float) -> int:
        """
        Ticks owed at clock reading `now` that have not been delivered yet.
        """
        elapsed = now - self.anchor
        if elapsed < 0:
            return 0
        owed = min(int(elapsed // self.tick_seconds), self.duration)
        return max(0, owed - self.ticks_delivered)

    def seconds_until_next_tick(self, now: float) -> float:
        next_tick_at = self.anchor + (self.ticks_delivered + 1) * self.tick_seconds
        return max(0.0, next_tick_at - now)

    def consume_tick(self) -> None:
        self.remaining -= 1
        self.ticks_delivered += 1
