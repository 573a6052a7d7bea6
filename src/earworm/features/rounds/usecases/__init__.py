"""
Summary: Round generation and session usecases.
Why: Provide a stable import path for the shell and tests.
"""

from .round_generator import ROUND_DURATION, RoundGenerator, reservoir_sample, start_round
from .session import GameSession

__all__ = [
    "GameSession",
    "ROUND_DURATION",
    "RoundGenerator",
    "reservoir_sample",
    "start_round",
]
