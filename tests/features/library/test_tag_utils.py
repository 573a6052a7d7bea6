"""Tests for the pure tag helpers used by the extractor."""

from pathlib import Path

from mutagen.id3 import APIC, ID3, TIT2, PictureType

from earworm.features.library.usecases.extraction import first_text, select_cover, title_from_path
from earworm.shared.track import CoverImage


def _picture(picture_type: PictureType, data: bytes, mime: str = "image/png") -> APIC:
    return APIC(encoding=3, mime=mime, type=picture_type, desc=data.decode(), data=data)


class TestSelectCover:
    """Cover selection walks pictures and stops at the first front cover."""

    def test_no_pictures(self) -> None:
        assert select_cover([]) is None

    def test_front_cover_before_other_image_wins(self) -> None:
        """A front cover seen first is kept even though another image follows."""
        pictures = [
            _picture(PictureType.COVER_FRONT, b"front"),
            _picture(PictureType.COVER_BACK, b"back", mime="image/jpeg"),
        ]

        assert select_cover(pictures) == CoverImage(mime_type="image/png", data=b"front")

    def test_front_cover_after_other_images_wins(self) -> None:
        pictures = [
            _picture(PictureType.ARTIST, b"artist"),
            _picture(PictureType.COVER_FRONT, b"front"),
            _picture(PictureType.COVER_BACK, b"back"),
        ]

        cover = select_cover(pictures)
        assert cover is not None
        assert cover.data == b"front"

    def test_without_front_cover_the_last_picture_wins(self) -> None:
        """The first picture is not privileged when no front cover exists."""
        pictures = [
            _picture(PictureType.ARTIST, b"artist"),
            _picture(PictureType.COVER_BACK, b"back", mime="image/jpeg"),
        ]

        assert select_cover(pictures) == CoverImage(mime_type="image/jpeg", data=b"back")

    def test_first_of_several_front_covers_wins(self) -> None:
        pictures = [
            _picture(PictureType.COVER_FRONT, b"one"),
            _picture(PictureType.COVER_FRONT, b"two"),
        ]

        cover = select_cover(pictures)
        assert cover is not None
        assert cover.data == b"one"


class TestTitleFromPath:
    def test_uses_stem(self) -> None:
        assert title_from_path(Path("/music/Blue Circle.mp3")) == "Blue Circle"

    def test_keeps_inner_dots(self) -> None:
        assert title_from_path(Path("/music/01. Intro.mp3")) == "01. Intro"

    def test_no_stem(self) -> None:
        assert title_from_path(Path("/")) is None


class TestFirstText:
    def test_present_and_absent_frames(self) -> None:
        tags = ID3()
        tags.add(TIT2(encoding=3, text=["Red Square", "ignored"]))

        assert first_text(tags, "TIT2") == "Red Square"
        assert first_text(tags, "TPE1") is None
