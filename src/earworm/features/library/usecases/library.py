"""src/earworm/features/library/usecases/library.py
What: Deduplicated track collection grown by recursive directory scans.
Why: Give round generation a stable set of unique tracks across many folders.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path
from typing import ClassVar

from earworm.platform.filesystem import iter_files
from earworm.platform.logging import logger as default_logger
from earworm.shared.errors import MetadataError
from earworm.shared.track import Track

from .extraction import MetadataExtractor
from .library_types import LibraryEvent, ScanLogContext, event_extra


class Library:
    """A set of unique tracks discovered across one or more scans.

    The library never shrinks. It holds no lock of its own; callers that scan
    and start rounds from different threads must guard both calls.
    """

    SUPPORTED_EXTENSION: ClassVar[str] = ".mp3"

    def __init__(
        self,
        logger: logging.Logger | None = None,
        extractor: MetadataExtractor | None = None,
    ) -> None:
        self._logger = logger or default_logger
        self._extractor = extractor or MetadataExtractor(logger=self._logger)
        self._tracks: set[Track] = set()

    @property
    def tracks(self) -> frozenset[Track]:
        """Snapshot of the tracks currently in the library."""
        return frozenset(self._tracks)

    def __len__(self) -> int:
        return len(self._tracks)

    def __iter__(self) -> Iterator[Track]:
        return iter(self._tracks)

    def __contains__(self, item: object) -> bool:
        return item in self._tracks

    def is_empty(self) -> bool:
        return not self._tracks

    def add(self, track: Track) -> bool:
        """Add a single track, returning ``False`` when an equal one is already present."""
        if track in self._tracks:
            return False
        self._tracks.add(track)
        return True

    def scan_directory(self, root: Path | str) -> int:
        """Recursively add every mp3 below ``root``.

        Symbolic links are followed. Files whose metadata cannot be read are
        skipped; a missing root adds nothing. Nothing here raises for
        per-file problems.

        Args:
            root: Directory to walk.

        Returns:
            int: Number of tracks that were not already in the library.
        """
        directory = Path(root).expanduser().absolute()
        stats = ScanLogContext(directory=directory)

        if not directory.is_dir():
            self._logger.warning(
                "Scan root is not a directory: %s",
                directory,
                extra=event_extra(LibraryEvent.SCAN_MISSING_ROOT, directory=directory),
            )
            return 0

        self._logger.info(
            "Scanning %s",
            directory,
            extra=event_extra(LibraryEvent.SCAN_START, directory=directory),
        )

        for file_path in iter_files(directory, follow_symlinks=True, on_error=self._log_walk_error):
            if not self.is_supported(file_path):
                continue
            stats.found += 1

            try:
                track = self._extractor.extract(file_path)
            except (MetadataError, OSError) as exc:
                stats.skipped += 1
                self._logger.debug(
                    "Skipping %s: %s",
                    file_path,
                    exc,
                    extra=event_extra(
                        LibraryEvent.TRACK_SKIP,
                        source_path=file_path,
                        source_base_path=directory,
                        error_message=str(exc),
                    ),
                )
                continue

            if self.add(track):
                stats.added += 1

        if stats.found == 0:
            self._logger.info(
                "No mp3 files found in %s",
                directory,
                extra=event_extra(LibraryEvent.SCAN_NO_FILES, directory=directory),
            )
            return 0

        self._logger.info(
            "Scan complete [found=%d, added=%d, skipped=%d, path=%s]",
            stats.found,
            stats.added,
            stats.skipped,
            directory,
            extra=event_extra(LibraryEvent.SCAN_COMPLETE, **stats.summary_extra()),
        )
        return stats.added

    @classmethod
    def is_supported(cls, file_path: Path) -> bool:
        """Return whether a file has the exact, case-sensitive ``.mp3`` suffix."""
        return file_path.suffix == cls.SUPPORTED_EXTENSION

    def _log_walk_error(self, exc: OSError) -> None:
        self._logger.debug("Unable to read %s: %s", getattr(exc, "filename", None), exc)


def new_library(logger: logging.Logger | None = None) -> Library:
    """Construct an empty library."""
    return Library(logger=logger)


def scan_directory(library: Library, root: Path | str) -> int:
    """Accumulate the mp3 files below ``root`` into ``library``."""
    return library.scan_directory(root)


__all__ = ["Library", "new_library", "scan_directory"]
