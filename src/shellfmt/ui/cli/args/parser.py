"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from shellfmt import __version__
from shellfmt.config.config import Config
from shellfmt.features.formatting import FormatOptions, Language
from shellfmt.platform.logging import logger, setup_logger
from shellfmt.ui.cli.args.options import CLIArgs, FormatArgs


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
            prog="shellfmt",
            usage="shellfmt [flags] [path ...]",
            description=(
                "Format shell scripts. Directories are searched for scripts; "
                "with no paths, standard input is formatted to standard output."
            ),
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        _ = parser.add_argument(
            "paths",
            nargs="*",
            type=str,
            help="Files or directories to format",
            metavar="PATH",
        )
        _ = parser.add_argument(
            "-w",
            "--write",
            action="store_true",
            help="Write result to file instead of stdout",
        )
        _ = parser.add_argument(
            "-l",
            "--list",
            dest="list_files",
            action="store_true",
            help="List files whose formatting differs",
        )
        _ = parser.add_argument(
            "-s",
            "--simplify",
            action="store_true",
            default=None,
            help="Simplify the code",
        )
        _ = parser.add_argument(
            "-p",
            "--posix",
            action="store_true",
            help="Parse POSIX shell code instead of bash",
        )
        _ = parser.add_argument(
            "-m",
            "--mksh",
            action="store_true",
            help="Parse MirBSD Korn shell code instead of bash",
        )
        _ = parser.add_argument(
            "-i",
            "--indent",
            type=int,
            default=None,
            metavar="N",
            help="Indent: 0 for tabs (default), >0 for number of spaces",
        )
        _ = parser.add_argument(
            "-bn",
            "--binary-next-line",
            action="store_true",
            default=None,
            help="Binary ops like && and | may start a line",
        )
        _ = parser.add_argument(
            "--to-json",
            action="store_true",
            help="Print the syntax tree as typed JSON (standard input only)",
        )
        _ = parser.add_argument(
            "--shfmt",
            type=str,
            default=None,
            metavar="EXECUTABLE",
            help="Path to the shfmt executable",
        )
        _ = parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show per-file progress and a run summary on stderr",
        )
        _ = parser.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all diagnostics except errors",
        )
        _ = parser.add_argument(
            "--version",
            action="version",
            version=__version__,
            help="Show version and exit",
        )
        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            FormatArgs: Validated arguments merged with the config file.

        Raises:
            SystemExit: On invalid flag combinations or an unreadable config.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        if parsed_args.quiet:
            log_level = logging.ERROR
        elif parsed_args.verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.WARNING

        try:
            configuration = Config.load()
        except (OSError, ValueError):
            sys.exit(1)
        _ = setup_logger(log_file=configuration.log_file, console_level=log_level)

        if parsed_args.posix and parsed_args.mksh:
            logger.error("cannot mix parser language flags")
            sys.exit(1)

        paths = [Path(raw) for raw in parsed_args.paths]
        if parsed_args.to_json and paths:
            logger.error("--to-json can only be used with stdin/out")
            sys.exit(1)

        indent = parsed_args.indent if parsed_args.indent is not None else configuration.indent
        if indent < 0:
            logger.error("indent must be 0 or a positive number of spaces, got %d", indent)
            sys.exit(1)

        options = FormatOptions(
            list_files=parsed_args.list_files,
            write=parsed_args.write,
            simplify=_pick(parsed_args.simplify, configuration.simplify),
            language=ArgumentParser._resolve_language(parsed_args, configuration),
            indent=indent,
            binary_next_line=_pick(parsed_args.binary_next_line, configuration.binary_next_line),
            to_json=parsed_args.to_json,
        )

        shfmt_path = Path(parsed_args.shfmt) if parsed_args.shfmt else configuration.shfmt_path

        return FormatArgs(
            options=options,
            paths=paths,
            shfmt_path=shfmt_path,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )

    @staticmethod
    def _resolve_language(parsed_args: argparse.Namespace, configuration: Config) -> Language:
        if parsed_args.posix:
            return Language.POSIX
        if parsed_args.mksh:
            return Language.MKSH
        return Language(configuration.language)


def _pick(flag: bool | None, configured: bool) -> bool:
    # Flags only ever switch options on; an absent flag defers to the config.
    return configured if flag is None else flag


__all__ = ["ArgumentParser"]
