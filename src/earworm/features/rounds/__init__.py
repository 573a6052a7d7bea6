"""Public surface for the rounds feature."""

from .domain import GuessOutcome, Round
from .usecases import ROUND_DURATION, GameSession, RoundGenerator, start_round

__all__ = [
    "GameSession",
    "GuessOutcome",
    "ROUND_DURATION",
    "Round",
    "RoundGenerator",
    "start_round",
]
