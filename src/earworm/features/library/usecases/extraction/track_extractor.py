"""Audio file metadata extraction functionality.

Where: src/earworm/features/library/usecases/extraction/track_extractor.py
What: Turn an mp3 file into a Track, degrading to filename-only metadata.
Why: Scans must never abort because one file has broken or missing tags.
"""

from __future__ import annotations

import logging
from pathlib import Path

from mutagen import MutagenError
from mutagen.id3 import ID3

from earworm.platform.logging import logger as default_logger
from earworm.shared.errors import MetadataError, NoMetadataError
from earworm.shared.track import Track

from ..library_types import LibraryEvent, event_extra
from ._tag_utils import first_text, select_cover, title_from_path

__all__ = ["MetadataExtractor"]


class MetadataExtractor:
    """Build tracks from ID3 tags with a filename fallback."""

    TITLE_FRAME = "TIT2"
    ARTIST_FRAME = "TPE1"
    ALBUM_FRAME = "TALB"
    PICTURE_FRAME = "APIC"

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or default_logger

    def extract(self, file_path: Path) -> Track:
        """Extract a track from an audio file.

        Args:
            file_path: Path to the audio file.

        Returns:
            Track: Rich metadata when the tag is usable, otherwise a track
            titled after the filename.

        Raises:
            NoMetadataError: If the filename has no stem to use as a title.
        """
        try:
            return self._from_tags(file_path)
        except (MutagenError, OSError, MetadataError) as exc:
            self._logger.debug("Error while reading metadata from %s: %r", file_path, exc)
            error_message = str(exc)

        title = title_from_path(file_path)
        if title is None:
            raise NoMetadataError(file_path)

        self._logger.warning(
            "Unable to read any metadata from %s, using filename instead",
            file_path,
            extra=event_extra(
                LibraryEvent.TRACK_FALLBACK,
                source_path=file_path,
                source_base_path=file_path.parent,
                error_message=error_message,
            ),
        )
        return Track(path=file_path, title=title)

    def _from_tags(self, file_path: Path) -> Track:
        tags = ID3(file_path)
        self._logger.debug("Opened %s with %d ID3 frames", file_path, len(tags))

        title = first_text(tags, self.TITLE_FRAME) or title_from_path(file_path)
        if title is None:
            raise MetadataError(file_path, "No title in tags or filename")

        track = Track(
            path=file_path,
            title=title,
            artist=first_text(tags, self.ARTIST_FRAME),
            album=first_text(tags, self.ALBUM_FRAME),
            cover=select_cover(tags.getall(self.PICTURE_FRAME)),
        )
        self._logger.debug("Extracted track: %s", track)
        return track
