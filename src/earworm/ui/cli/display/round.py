"""Render a single round for the terminal."""

from __future__ import annotations

from typing import final

from rich.console import Console
from rich.markup import escape

from earworm.features.rounds import Round


@final
class RoundDisplay:
    """Handles round display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show_round(self, round_: Round, now: float, *, reveal: bool = False) -> None:
        """Print numbered candidates and the time left.

        Args:
            round_: Round to render.
            now: Current reading of the round's clock.
            reveal: Whether to mark the correct answer.
        """
        self.console.print(f"\n[bold]Which track is playing?[/bold] ({round_.remaining(now):.0f}s left)")
        for index, track in enumerate(round_.candidates, start=1):
            line = f"  {index}. {escape(track.display_name)}"
            if track.album:
                line += f" [dim]({escape(track.album)})[/dim]"
            if reveal and index - 1 == round_.correct_index:
                line += "  [green]<- correct[/green]"
            self.console.print(line)

        if reveal:
            self.console.print(f"\nAnswer: [green]{escape(str(round_.correct_track.path))}[/green]")
