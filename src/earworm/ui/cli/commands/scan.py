"""List the tracks found below the requested folders."""

from typing import override

from earworm.ui.cli.commands.executor import CommandExecutor
from earworm.ui.cli.display import LibraryDisplay


class ScanCommand(CommandExecutor):
    """Command for scanning folders into a library."""

    @override
    def execute(self) -> int:
        _ = self.scan_all()
        LibraryDisplay().show_library(self.session.library, self.args.music_dirs, quiet=self.args.quiet)
        return 0
