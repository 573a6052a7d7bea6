"""Earworm: a music trivia game core.

Scan folders of mp3 files into a deduplicated library, then draw timed rounds
of candidate tracks for the player to identify.
"""

from earworm.features.library import Library, MetadataExtractor, new_library, scan_directory
from earworm.features.rounds import (
    ROUND_DURATION,
    GameSession,
    GuessOutcome,
    Round,
    RoundGenerator,
    start_round,
)
from earworm.shared import (
    CoverImage,
    EarwormError,
    EmptyLibraryError,
    InvalidCandidateCountError,
    MetadataError,
    NoMetadataError,
    Track,
)

__version__ = "0.1.0"

__all__ = [
    "CoverImage",
    "EarwormError",
    "EmptyLibraryError",
    "GameSession",
    "GuessOutcome",
    "InvalidCandidateCountError",
    "Library",
    "MetadataError",
    "MetadataExtractor",
    "NoMetadataError",
    "ROUND_DURATION",
    "Round",
    "RoundGenerator",
    "Track",
    "new_library",
    "scan_directory",
    "start_round",
]
