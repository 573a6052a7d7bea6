"""Console display helpers for the CLI."""

from .library import LibraryDisplay
from .round import RoundDisplay

__all__ = ["LibraryDisplay", "RoundDisplay"]
