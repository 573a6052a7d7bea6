"""Tests for the Round record."""

from pathlib import Path

import pytest

from earworm.features.rounds import Round
from earworm.shared.track import Track

RED = Track(path=Path("/music/red.mp3"), title="Red Square")
BLUE = Track(path=Path("/music/blue.mp3"), title="Blue Circle")


def _round(correct_index: int = 1) -> Round:
    return Round(candidates=(RED, BLUE), correct_index=correct_index, started_at=50.0, deadline=60.0)


class TestRound:
    def test_correct_track(self) -> None:
        assert _round(1).correct_track == BLUE

    def test_rejects_empty_candidates(self) -> None:
        with pytest.raises(ValueError, match="at least one"):
            _ = Round(candidates=(), correct_index=0, started_at=0.0, deadline=10.0)

    @pytest.mark.parametrize("index", [-1, 2])
    def test_rejects_out_of_range_index(self, index: int) -> None:
        with pytest.raises(ValueError, match="out of range"):
            _ = _round(index)

    def test_rejects_deadline_not_after_start(self) -> None:
        with pytest.raises(ValueError):
            _ = Round(candidates=(RED,), correct_index=0, started_at=5.0, deadline=5.0)

    def test_timing_helpers(self) -> None:
        round_ = _round()

        assert round_.duration == 10.0
        assert round_.remaining(55.0) == 5.0
        assert round_.remaining(70.0) == 0.0
        assert round_.remaining_fraction(50.0) == 1.0
        assert round_.remaining_fraction(57.5) == pytest.approx(0.25)
        assert not round_.is_expired(59.9)
        assert round_.is_expired(60.0)

    def test_is_correct_accepts_index_or_track(self) -> None:
        round_ = _round(0)

        assert round_.is_correct(0)
        assert round_.is_correct(RED)
        assert not round_.is_correct(1)
        assert not round_.is_correct(BLUE)

    @pytest.mark.parametrize("choice", [True, False])
    def test_is_correct_rejects_bool(self, choice: bool) -> None:
        with pytest.raises(TypeError):
            _ = _round(1).is_correct(choice)

    def test_is_immutable(self) -> None:
        round_ = _round()

        with pytest.raises(AttributeError):
            round_.correct_index = 0  # type: ignore[misc]
