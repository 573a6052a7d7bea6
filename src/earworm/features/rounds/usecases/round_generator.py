"""
Summary: Draw candidate tracks and the correct answer for a new round.
Why: Keep sampling and timing rules in one place the shell can call synchronously.
"""

from __future__ import annotations

import logging
import random
import time
from collections.abc import Callable, Iterable
from typing import Final, TypeVar

from earworm.config.settings import ROUND_DURATION_SECONDS
from earworm.features.library.usecases.library import Library
from earworm.features.library.usecases.library_types import LibraryEvent, event_extra
from earworm.platform.logging import logger as default_logger
from earworm.shared.errors import EmptyLibraryError, InvalidCandidateCountError

from ..domain.round import Round

T = TypeVar("T")

ROUND_DURATION: Final[float] = ROUND_DURATION_SECONDS


def reservoir_sample(items: Iterable[T], k: int, rng: random.Random) -> list[T]:
    """Draw up to ``k`` items uniformly without replacement in a single pass.

    Every item ends up in the result with probability ``k / n``. Fewer than
    ``k`` items are returned when the input is shorter.
    """
    reservoir: list[T] = []
    for seen, item in enumerate(items):
        if seen < k:
            reservoir.append(item)
            continue
        slot = rng.randrange(seen + 1)
        if slot < k:
            reservoir[slot] = item
    return reservoir


class RoundGenerator:
    """Create rounds from a library snapshot.

    Requesting more candidates than the library holds yields a round with
    every track rather than an error.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        clock: Callable[[], float] | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._rng = rng or random.Random()
        self._clock = clock or time.monotonic
        self._logger = logger or default_logger

    @property
    def clock(self) -> Callable[[], float]:
        """Clock used to stamp round start times and deadlines."""
        return self._clock

    def start_round(self, library: Library, candidate_count: int) -> Round:
        """Start a round with up to ``candidate_count`` candidates.

        Raises:
            InvalidCandidateCountError: If ``candidate_count`` is below one.
            EmptyLibraryError: If the library holds no tracks.
        """
        if candidate_count < 1:
            raise InvalidCandidateCountError(candidate_count)
        if library.is_empty():
            raise EmptyLibraryError()

        candidates = tuple(reservoir_sample(library, candidate_count, self._rng))
        correct_index = self._rng.randrange(len(candidates))
        started_at = self._clock()

        round_ = Round(
            candidates=candidates,
            correct_index=correct_index,
            started_at=started_at,
            deadline=started_at + ROUND_DURATION,
        )
        self._logger.debug(
            "Round started with %d of %d requested candidates",
            len(candidates),
            candidate_count,
            extra=event_extra(
                LibraryEvent.ROUND_START,
                candidates=len(candidates),
                requested=candidate_count,
            ),
        )
        return round_


_default_generator = RoundGenerator()


def start_round(library: Library, candidate_count: int) -> Round:
    """Start a round using the process-wide random source and monotonic clock."""
    return _default_generator.start_round(library, candidate_count)


__all__ = ["ROUND_DURATION", "RoundGenerator", "reservoir_sample", "start_round"]
