"""Command execution package for CLI."""

from earworm.ui.cli.commands.executor import CommandExecutor
from earworm.ui.cli.commands.round import RoundCommand
from earworm.ui.cli.commands.scan import ScanCommand

__all__ = ["CommandExecutor", "RoundCommand", "ScanCommand"]
