"""Data structures that describe one timed quiz prompt."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from earworm.shared.track import Track


class GuessOutcome(str, Enum):
    """Result of comparing a player's pick against the current round."""

    CORRECT = "correct"
    WRONG = "wrong"
    EXPIRED = "expired"
    NO_ROUND = "no_round"


@dataclass(slots=True, frozen=True)
class Round:
    """Candidates, the correct answer, and the instant the round expires.

    ``started_at`` and ``deadline`` are readings of the same monotonic clock
    the round was generated with. Rounds are never mutated; ending one early
    is the caller's business.
    """

    candidates: tuple[Track, ...]
    correct_index: int
    started_at: float
    deadline: float

    def __post_init__(self) -> None:
        if not self.candidates:
            raise ValueError("A round needs at least one candidate")
        if not 0 <= self.correct_index < len(self.candidates):
            raise ValueError(
                f"correct_index {self.correct_index} out of range for {len(self.candidates)} candidates"
            )
        if self.deadline <= self.started_at:
            raise ValueError("A round must end after it starts")

    @property
    def correct_track(self) -> Track:
        """The track the player must identify."""
        return self.candidates[self.correct_index]

    @property
    def duration(self) -> float:
        return self.deadline - self.started_at

    def remaining(self, now: float) -> float:
        """Seconds left before the deadline, never negative."""
        return max(0.0, self.deadline - now)

    def remaining_fraction(self, now: float) -> float:
        """Share of the round still left, from ``1.0`` at start to ``0.0`` at expiry."""
        return min(1.0, self.remaining(now) / self.duration)

    def is_expired(self, now: float) -> bool:
        return now >= self.deadline

    def is_correct(self, choice: int | Track) -> bool:
        """Check a pick given either as a candidate index or as a track.

        Raises:
            TypeError: If ``choice`` is a ``bool``, which would pass as index 0 or 1.
        """
        if isinstance(choice, bool):
            raise TypeError("choice must be a candidate index or a Track, not bool")
        if isinstance(choice, Track):
            return choice == self.correct_track
        return choice == self.correct_index


__all__ = ["GuessOutcome", "Round"]
