"""Tests for CLI functionality."""

from collections.abc import Callable
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from earworm.ui.cli import CommandProcessor
from earworm.ui.cli.args import ArgumentParser, RoundArgs, ScanArgs

Mp3Writer = Callable[..., Path]


@pytest.fixture
def music_dir(tmp_path: Path, write_mp3: Mp3Writer) -> Path:
    root = tmp_path / "music"
    _ = write_mp3(root / "red.mp3", title="Red", artist="Shapes")
    _ = write_mp3(root / "sub" / "blue.mp3", title="Blue")
    return root


@pytest.fixture
def common_args(tmp_path: Path) -> list[str]:
    """Keep config and log files inside the test's temporary directory."""
    return ["--config", str(tmp_path / "config.toml"), "--log-file", str(tmp_path / "logs" / "earworm.log")]


class TestArgumentParser:
    def test_scan_args(self, music_dir: Path, common_args: list[str]) -> None:
        args = ArgumentParser.process_args(["scan", str(music_dir), "--quiet", *common_args])

        assert args == ScanArgs(command="scan", music_dirs=[music_dir], verbose=False, quiet=True)

    def test_round_uses_configured_candidate_count(self, tmp_path: Path, music_dir: Path) -> None:
        config_file = tmp_path / "config.toml"
        _ = config_file.write_text(f'music_dirs = ["{music_dir.as_posix()}"]\ncandidate_count = 2\n')

        args = ArgumentParser.process_args(
            ["round", "--config", str(config_file), "--log-file", str(tmp_path / "e.log")]
        )

        assert isinstance(args, RoundArgs)
        assert args.music_dirs == [music_dir]
        assert args.candidate_count == 2
        assert args.reveal is False

    def test_no_folders_exits(self, common_args: list[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            _ = ArgumentParser.process_args(["scan", *common_args])

        assert exc_info.value.code == 1


class TestCommandProcessor:
    def test_scan_prints_summary(
        self, music_dir: Path, common_args: list[str], capsys: pytest.CaptureFixture[str]
    ) -> None:
        CommandProcessor.process_command(["scan", str(music_dir), *common_args])

        out = capsys.readouterr().out
        assert "Library Summary" in out
        assert "Tracks: 2" in out

    def test_scan_quiet_prints_nothing(
        self, music_dir: Path, common_args: list[str], capsys: pytest.CaptureFixture[str]
    ) -> None:
        CommandProcessor.process_command(["scan", str(music_dir), "--quiet", *common_args])

        assert capsys.readouterr().out == ""

    def test_round_reveals_answer(
        self, music_dir: Path, common_args: list[str], capsys: pytest.CaptureFixture[str]
    ) -> None:
        CommandProcessor.process_command(["round", str(music_dir), "-n", "2", "--reveal", *common_args])

        out = capsys.readouterr().out
        assert "Which track is playing?" in out
        assert "<- correct" in out
        assert "Answer:" in out

    def test_round_on_empty_folder_exits_with_error(self, tmp_path: Path, common_args: list[str]) -> None:
        empty = tmp_path / "empty"
        empty.mkdir()

        with pytest.raises(SystemExit) as exc_info:
            CommandProcessor.process_command(["round", str(empty), *common_args])

        assert exc_info.value.code == 1

    def test_invalid_candidate_count_exits_with_error(
        self, music_dir: Path, common_args: list[str]
    ) -> None:
        with pytest.raises(SystemExit) as exc_info:
            CommandProcessor.process_command(["round", str(music_dir), "-n", "0", *common_args])

        assert exc_info.value.code == 1

    def test_keyboard_interrupt_exits_130(
        self, music_dir: Path, common_args: list[str], mocker: MockerFixture
    ) -> None:
        _ = mocker.patch(
            "earworm.ui.cli.commands.scan.ScanCommand.execute",
            side_effect=KeyboardInterrupt,
        )

        with pytest.raises(SystemExit) as exc_info:
            CommandProcessor.process_command(["scan", str(music_dir), *common_args])

        assert exc_info.value.code == 130
