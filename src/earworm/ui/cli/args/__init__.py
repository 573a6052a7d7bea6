"""Command line argument handling package."""

from earworm.ui.cli.args.parser import ArgumentParser
from earworm.ui.cli.args.options import CLIArgs, RoundArgs, ScanArgs

__all__ = ["ArgumentParser", "CLIArgs", "RoundArgs", "ScanArgs"]
