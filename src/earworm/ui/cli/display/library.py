"""src/earworm/ui/cli/display/library.py
What: Render scanned libraries as Rich tables.
Why: Keep console formatting out of the command executors.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import final

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from earworm.features.library import Library
from earworm.shared.track import Track


def _cover_label(track: Track) -> str:
    if track.cover is None:
        return "-"
    return f"{track.cover.mime_type} ({track.cover.size} B)"


@final
class LibraryDisplay:
    """Handles library display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show_library(self, library: Library, roots: Sequence[Path], quiet: bool = False) -> None:
        """Print every track sorted by path followed by a short summary.

        Args:
            library: Library to render.
            roots: Folders that were scanned.
            quiet: Whether to suppress non-error output.
        """
        if quiet:
            return

        table = Table(title="Library", show_lines=False)
        table.add_column("Title", style="bold")
        table.add_column("Artist")
        table.add_column("Album")
        table.add_column("Cover")
        table.add_column("Path", style="dim")

        for track in sorted(library, key=lambda item: str(item.path)):
            table.add_row(
                escape(track.title),
                escape(track.artist or "-"),
                escape(track.album or "-"),
                _cover_label(track),
                escape(str(track.path)),
            )

        self.console.print(table)
        self.console.print("\n[bold]Library Summary:[/bold]")
        self.console.print(f"Folders scanned: {len(roots)}")
        self.console.print(f"[green]Tracks: {len(library)}[/green]")
