"""src/earworm/features/library/usecases/library_types.py
Where: Library feature usecases layer.
What: Structured log event identifiers and scan bookkeeping.
Why: Keep the library and extractor lean by centralising shared types.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from typing import Any


class LibraryEvent(StrEnum):
    """Structured event identifiers for scan and round logs."""

    SCAN_START = "library.scan.start"
    SCAN_COMPLETE = "library.scan.complete"
    SCAN_NO_FILES = "library.scan.no_files"
    SCAN_MISSING_ROOT = "library.scan.missing_root"
    TRACK_FALLBACK = "library.track.fallback"
    TRACK_SKIP = "library.track.skip"
    ROUND_START = "round.start"


def event_extra(event: LibraryEvent, **context: object) -> dict[str, Any]:
    """Build the ``extra`` mapping for a structured log record."""

    extra: dict[str, Any] = {"library_event": event.value}
    for key, value in context.items():
        extra[key] = str(value) if isinstance(value, Path) else value
    return extra


@dataclass(slots=True)
class ScanLogContext:
    """Mutable bookkeeping for one directory scan."""

    directory: Path
    start_time: float = field(default_factory=time.perf_counter)
    found: int = 0
    added: int = 0
    skipped: int = 0

    def duration_seconds(self) -> float:
        """Return the elapsed scan time in seconds."""

        return time.perf_counter() - self.start_time

    def summary_extra(self) -> dict[str, object]:
        """Return keyword context describing the scan so far."""

        return {
            "directory": self.directory,
            "found": self.found,
            "added": self.added,
            "skipped": self.skipped,
            "duration_seconds": self.duration_seconds(),
        }


__all__ = ["LibraryEvent", "ScanLogContext", "event_extra"]
