"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, final


@final
@dataclass(slots=True)
class ScanArgs:
    """Command line arguments for the ``scan`` subcommand."""

    command: Literal["scan"]
    music_dirs: list[Path]
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class RoundArgs:
    """Command line arguments for the ``round`` subcommand."""

    command: Literal["round"]
    music_dirs: list[Path]
    verbose: bool
    quiet: bool
    candidate_count: int
    reveal: bool


CLIArgs = ScanArgs | RoundArgs

__all__ = ["CLIArgs", "RoundArgs", "ScanArgs"]
