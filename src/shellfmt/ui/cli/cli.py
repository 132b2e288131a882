"""Command line interface for shellfmt."""

from typing import final

from shellfmt.platform.logging import logger
from shellfmt.ui.cli.args import ArgumentParser
from shellfmt.ui.cli.args.options import CLIArgs
from shellfmt.ui.cli.commands import CommandExecutor, PathsCommand, StdinCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> int:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            int: Process exit code.
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)
            command: CommandExecutor = (
                StdinCommand(args) if args.reads_stdin else PathsCommand(args)
            )
            return command.execute()
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            return 130
        except BrokenPipeError:
            # Reader went away (e.g. piped into head); nothing left to report.
            return 1


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code; non-zero when any item failed.
    """
    return CommandProcessor.process_command()
