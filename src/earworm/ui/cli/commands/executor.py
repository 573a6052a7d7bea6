"""src/earworm/ui/cli/commands/executor.py
What: Provide shared wiring for CLI command executors.
Why: Reuse session setup and folder scanning across commands.
"""

from abc import ABC, abstractmethod

from earworm.features.rounds import GameSession
from earworm.ui.cli.args.options import CLIArgs


class CommandExecutor(ABC):
    """Base class for command execution."""

    args: CLIArgs
    session: GameSession

    def __init__(self, args: CLIArgs, session: GameSession | None = None) -> None:
        """Initialize command executor.

        Args:
            args: Command line arguments.
            session: Session to scan into. A fresh one is created by default.
        """
        self.args = args
        self.session = session or GameSession()

    def scan_all(self) -> int:
        """Scan every requested folder into the session library.

        Returns:
            int: Number of new tracks added across all folders.
        """
        return sum(self.session.scan(directory) for directory in self.args.music_dirs)

    @abstractmethod
    def execute(self) -> int:
        """Execute the command.

        Returns:
            Process exit code.
        """
        pass
