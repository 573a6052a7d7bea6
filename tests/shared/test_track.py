"""Tests for the Track and CoverImage records."""

from pathlib import Path

import pytest

from earworm.shared.track import CoverImage, Track


class TestTrack:
    """Test cases for Track identity and invariants."""

    def test_equal_fields_collapse_in_a_set(self) -> None:
        """Two tracks with identical fields are one set member."""
        cover = CoverImage(mime_type="image/png", data=b"\x89PNG")
        first = Track(path=Path("/music/a.mp3"), title="A", artist="X", album="Y", cover=cover)
        second = Track(
            path=Path("/music/a.mp3"),
            title="A",
            artist="X",
            album="Y",
            cover=CoverImage(mime_type="image/png", data=b"\x89PNG"),
        )

        assert first == second
        assert len({first, second}) == 1

    def test_any_differing_field_makes_tracks_distinct(self) -> None:
        """Equality spans every field, not just the path."""
        base = Track(path=Path("/music/a.mp3"), title="A")
        retitled = Track(path=Path("/music/a.mp3"), title="B")
        with_artist = Track(path=Path("/music/a.mp3"), title="A", artist="X")

        assert len({base, retitled, with_artist}) == 3

    def test_empty_title_is_rejected(self) -> None:
        """A track must always carry a title."""
        with pytest.raises(ValueError, match="title"):
            _ = Track(path=Path("/music/a.mp3"), title="")

    def test_display_name(self) -> None:
        """Artist is prefixed only when known."""
        assert Track(path=Path("/a.mp3"), title="Song", artist="Band").display_name == "Band - Song"
        assert Track(path=Path("/a.mp3"), title="Song").display_name == "Song"

    def test_cover_size(self) -> None:
        assert CoverImage(mime_type="image/jpeg", data=b"1234").size == 4
