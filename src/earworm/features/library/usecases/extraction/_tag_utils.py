"""Tag utility helpers.

Where: src/earworm/features/library/usecases/extraction/_tag_utils.py
What: Pure helpers for reading ID3 frames and deriving fallback titles.
Why: Keep the extractor focused on orchestration and fallback policy.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from mutagen.id3 import APIC, ID3, PictureType

from earworm.shared.track import CoverImage

__all__ = [
    "first_text",
    "select_cover",
    "title_from_path",
]


def first_text(tags: ID3, frame_id: str) -> str | None:
    """Return the first text value of a frame, or ``None`` if the frame is absent."""
    frame = tags.get(frame_id)
    if frame is None:
        return None
    text = getattr(frame, "text", None)
    if not text:
        return None
    return str(text[0])


def title_from_path(path: Path) -> str | None:
    """Derive a title from the filename without its extension."""
    stem = path.stem
    return stem if stem else None


def select_cover(pictures: Iterable[APIC]) -> CoverImage | None:
    """Pick the artwork to show for a track.

    Walks every picture, remembering the most recent one, and stops at the
    first front cover. Without a front cover the last picture wins.
    """
    best: APIC | None = None
    for picture in pictures:
        best = picture
        if picture.type == PictureType.COVER_FRONT:
            break

    if best is None:
        return None
    return CoverImage(mime_type=best.mime, data=bytes(best.data))
