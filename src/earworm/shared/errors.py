"""
Summary: Exception hierarchy for library scanning and round generation.
Why: Let callers tell "no library loaded yet" apart from every other failure.
"""

from __future__ import annotations

from pathlib import Path


class EarwormError(Exception):
    """Base class for errors raised by the game core."""


class MetadataError(EarwormError):
    """Raised when a file cannot be turned into a track."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f"{message}: {path}")
        self.path = path


class NoMetadataError(MetadataError):
    """Raised when neither tags nor the filename provide a title."""

    def __init__(self, path: Path) -> None:
        super().__init__(path, "No usable title in tags or filename")


class EmptyLibraryError(EarwormError):
    """Raised when a round is requested from a library without tracks."""

    def __init__(self) -> None:
        super().__init__("Cannot start a round: the library is empty")


class InvalidCandidateCountError(EarwormError, ValueError):
    """Raised when a round is requested with fewer than one candidate."""

    def __init__(self, candidate_count: int) -> None:
        super().__init__(f"Candidate count must be at least 1, got {candidate_count}")
        self.candidate_count = candidate_count


__all__ = [
    "EarwormError",
    "EmptyLibraryError",
    "InvalidCandidateCountError",
    "MetadataError",
    "NoMetadataError",
]
