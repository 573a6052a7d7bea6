"""Domain records for quiz rounds."""

from .round import GuessOutcome, Round

__all__ = ["GuessOutcome", "Round"]
