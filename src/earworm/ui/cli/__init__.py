"""Command line entry point for Earworm."""

from earworm.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
