"""Shared pytest fixtures for library and round tests."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Sequence
from pathlib import Path

import pytest
from mutagen.id3 import APIC, ID3, TALB, TIT2, TPE1

from earworm.features.library import Library
from earworm.platform.logging import LOGGER_NAME
from earworm.shared.track import Track

PictureSpec = tuple[str, int, str, bytes]
Mp3Writer = Callable[..., Path]


@pytest.fixture(autouse=True)
def reset_earworm_logger() -> Iterator[None]:
    """Drop handlers attached by CLI runs so tests do not leak console output."""

    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()


@pytest.fixture
def write_mp3() -> Mp3Writer:
    """Return a helper that writes an ID3 tag into a fresh ``.mp3`` file.

    Pictures are given as ``(mime, picture_type, description, data)`` tuples
    and are stored in the order supplied.
    """

    def _write(
        path: Path,
        *,
        title: str | None = None,
        artist: str | None = None,
        album: str | None = None,
        pictures: Sequence[PictureSpec] = (),
    ) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        _ = path.write_bytes(b"")
        tags = ID3()
        if title is not None:
            tags.add(TIT2(encoding=3, text=title))
        if artist is not None:
            tags.add(TPE1(encoding=3, text=artist))
        if album is not None:
            tags.add(TALB(encoding=3, text=album))
        for mime, picture_type, desc, data in pictures:
            tags.add(APIC(encoding=3, mime=mime, type=picture_type, desc=desc, data=data))
        tags.save(path)
        return path

    return _write


@pytest.fixture
def quiet_logger() -> logging.Logger:
    """Logger injected into components under test; records still reach caplog."""

    return logging.getLogger("earworm.tests")


@pytest.fixture
def shapes_library(quiet_logger: logging.Logger) -> Library:
    """Library holding three tracks named after shapes."""

    library = Library(logger=quiet_logger)
    for name, title in (("red", "Red Square"), ("blue", "Blue Circle"), ("green", "Green Triangle")):
        _ = library.add(Track(path=Path(f"/music/{name}.mp3"), title=title))
    return library
