"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from earworm.config.config import Config
from earworm.config.settings import resolve_candidate_count
from earworm.platform.logging import DEFAULT_LOG_FILE, logger, setup_logger
from earworm.ui.cli.args.options import CLIArgs, RoundArgs, ScanArgs


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="earworm",
            description="Earworm - scan music folders and preview trivia rounds.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        scan_parser = subparsers.add_parser(
            "scan",
            help="Scan folders and list the tracks found",
        )
        ArgumentParser._configure_common(scan_parser)

        round_parser = subparsers.add_parser(
            "round",
            help="Scan folders and print one round of candidates",
        )
        ArgumentParser._configure_common(round_parser)
        _ = round_parser.add_argument(
            "-n",
            "--candidates",
            type=int,
            dest="candidate_count",
            metavar="N",
            help="Number of candidate tracks (defaults to the configured value)",
        )
        _ = round_parser.add_argument(
            "--reveal",
            action="store_true",
            help="Mark the correct answer in the output",
        )

        return parser

    @staticmethod
    def _configure_common(parser: argparse.ArgumentParser) -> None:
        """Apply options shared by every subcommand."""

        _ = parser.add_argument(
            "music_dirs",
            nargs="*",
            type=str,
            help="Folders to scan (defaults to music_dirs from the config file)",
            metavar="DIR",
        )
        _ = parser.add_argument(
            "--config",
            type=str,
            help="Use this config file instead of the default location",
            metavar="CONFIG_PATH",
        )
        _ = parser.add_argument(
            "--log-file",
            type=str,
            help="Write detailed logs to this file",
            metavar="LOG_FILE",
        )
        _ = parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show detailed scanning information",
        )
        _ = parser.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: If no folders are available or validation fails.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        is_quiet = bool(getattr(parsed_args, "quiet", False))
        is_verbose = bool(getattr(parsed_args, "verbose", False))

        if is_quiet:
            log_level = logging.ERROR
        elif is_verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        config_path = Path(parsed_args.config) if parsed_args.config else None
        configuration = Config.load(config_path)
        if parsed_args.log_file:
            log_file_path = Path(parsed_args.log_file)
        else:
            log_file_path = configuration.log_file or DEFAULT_LOG_FILE
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        music_dirs = [Path(value) for value in parsed_args.music_dirs] or list(configuration.music_dirs)
        if not music_dirs:
            logger.error("No music folders given and none configured in music_dirs")
            sys.exit(1)

        command: str = parsed_args.command

        if command == "scan":
            return ScanArgs(
                command="scan",
                music_dirs=music_dirs,
                verbose=is_verbose,
                quiet=is_quiet,
            )

        if command == "round":
            return RoundArgs(
                command="round",
                music_dirs=music_dirs,
                verbose=is_verbose,
                quiet=is_quiet,
                candidate_count=resolve_candidate_count(configuration, parsed_args.candidate_count),
                reveal=bool(parsed_args.reveal),
            )

        logger.error("Unsupported command: %s", command)
        sys.exit(2)
