"""
Summary: Caller-side game state holding the library guard and current round slot.
Why: Rounds are immutable, so ending one early means clearing the slot that holds it.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from pathlib import Path
from typing import Final

from earworm.config.settings import DEFAULT_CANDIDATE_COUNT
from earworm.features.library.usecases.library import Library
from earworm.shared.track import Track

from ..domain.round import GuessOutcome, Round
from .round_generator import RoundGenerator


class GameSession:
    """One player's session: a library, its guard, and an optional current round.

    Scans and round starts share a single lock, so a shell may scan from a
    worker thread while the UI thread starts rounds and checks guesses.

    Without an explicit ``clock``, expiry is checked on the generator's clock.
    """

    def __init__(
        self,
        library: Library | None = None,
        candidate_count: int = DEFAULT_CANDIDATE_COUNT,
        generator: RoundGenerator | None = None,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self.library: Final[Library] = library or Library()
        self.candidate_count = candidate_count
        if generator is None:
            generator = RoundGenerator(clock=clock)
        self._generator = generator
        # Expiry must be judged on the clock that stamped the deadline.
        self._clock = clock or generator.clock
        self._lock = threading.Lock()
        self._current: Round | None = None

    @property
    def current_round(self) -> Round | None:
        with self._lock:
            return self._current

    def scan(self, root: Path | str) -> int:
        """Add the tracks below ``root``; blocks while the walk runs."""
        with self._lock:
            return self.library.scan_directory(root)

    def new_round(self) -> Round:
        """Replace the current round with a fresh one.

        Raises:
            EmptyLibraryError: If nothing has been scanned yet.
        """
        with self._lock:
            self._current = self._generator.start_round(self.library, self.candidate_count)
            return self._current

    def guess(self, choice: int | Track) -> GuessOutcome:
        """Check a pick against the current round.

        A correct pick or an expired round clears the slot; a wrong pick
        leaves the round running.
        """
        with self._lock:
            current = self._current
            if current is None:
                return GuessOutcome.NO_ROUND
            if current.is_expired(self._clock()):
                self._current = None
                return GuessOutcome.EXPIRED
            if current.is_correct(choice):
                self._current = None
                return GuessOutcome.CORRECT
            return GuessOutcome.WRONG

    def tick(self, now: float | None = None) -> Round | None:
        """Drop the current round once its deadline passes.

        Returns:
            Round | None: The round still in play, if any.
        """
        with self._lock:
            current = self._current
            if current is not None and current.is_expired(self._clock() if now is None else now):
                self._current = None
            return self._current

    def end_round(self) -> Round | None:
        """Clear the current round and return what was in the slot."""
        with self._lock:
            current, self._current = self._current, None
            return current


__all__ = ["GameSession"]
