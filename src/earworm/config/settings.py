"""Where: src/earworm/config/settings.py
What: Derived runtime settings sourced from persisted configuration.
Why: Expose validated constants to feature layers without repeating boundary checks.
"""

from __future__ import annotations

from earworm.config.config import CANDIDATE_COUNT_DEFAULT, Config

# Rounds last a fixed ten seconds; the shell may display it but not change it.
ROUND_DURATION_SECONDS: float = 10.0

# Three candidates per round unless configured otherwise.
DEFAULT_CANDIDATE_COUNT: int = CANDIDATE_COUNT_DEFAULT


def resolve_candidate_count(config: Config, override: int | None = None) -> int:
    """Pick the candidate count for a round.

    An explicit override is returned untouched so the round generator can
    reject invalid values. A bad config value falls back to the default.
    """

    if override is not None:
        return override
    value = config.candidate_count
    return value if isinstance(value, int) and value > 0 else DEFAULT_CANDIDATE_COUNT


__all__ = [
    "DEFAULT_CANDIDATE_COUNT",
    "ROUND_DURATION_SECONDS",
    "resolve_candidate_count",
]
