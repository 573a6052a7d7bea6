# Where: earworm.shared.track
# What: Canonical Track and CoverImage records shared across features.
# Why: One immutable, hashable representation keeps library deduplication exact.

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True, slots=True)
class CoverImage:
    """Embedded artwork picked from a track's tag."""

    mime_type: str
    data: bytes = field(repr=False)

    @property
    def size(self) -> int:
        """Return the image payload size in bytes."""

        return len(self.data)


@dataclass(frozen=True, slots=True)
class Track:
    """One playable audio file and its display metadata.

    Equality and hashing span every field, so two scans of the same file with
    the same tags collapse into one library entry.
    """

    path: Path
    title: str
    artist: str | None = None
    album: str | None = None
    cover: CoverImage | None = None

    def __post_init__(self) -> None:
        if not self.title:
            raise ValueError(f"Track title must not be empty: {self.path}")

    @property
    def display_name(self) -> str:
        """Return ``"Artist - Title"`` or just the title when no artist is known."""

        if self.artist:
            return f"{self.artist} - {self.title}"
        return self.title


__all__ = ["CoverImage", "Track"]
