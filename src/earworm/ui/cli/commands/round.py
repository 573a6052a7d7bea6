"""src/earworm/ui/cli/commands/round.py
What: Generate and print one round from the scanned folders.
Why: Let users check candidate selection without the graphical shell.
"""

import time
from typing import override

from earworm.ui.cli.args.options import RoundArgs
from earworm.ui.cli.commands.executor import CommandExecutor
from earworm.ui.cli.display import RoundDisplay


class RoundCommand(CommandExecutor):
    """Command for previewing a round."""

    args: RoundArgs

    @override
    def execute(self) -> int:
        """Scan, start a round and print it.

        Raises:
            EmptyLibraryError: If no tracks were found.
        """
        _ = self.scan_all()
        self.session.candidate_count = self.args.candidate_count
        round_ = self.session.new_round()
        RoundDisplay().show_round(round_, time.monotonic(), reveal=self.args.reveal)
        return 0
