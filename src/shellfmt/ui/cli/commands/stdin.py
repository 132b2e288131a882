"""src/shellfmt/ui/cli/commands/stdin.py
What: Format standard input to standard output.
Why: Stdin mode has its own option rules and a single unit.
"""

import sys
from typing import IO, override

from shellfmt.application.services.format_service import FormatService
from shellfmt.features.formatting import ShellFormatError
from shellfmt.platform.logging import logger
from shellfmt.ui.cli.args.options import FormatArgs
from shellfmt.ui.cli.commands.executor import CommandExecutor


class StdinCommand(CommandExecutor):
    """Command for formatting standard input."""

    stdin: IO[bytes]

    def __init__(
        self,
        args: FormatArgs,
        *,
        app: FormatService | None = None,
        out: IO[bytes] | None = None,
        stdin: IO[bytes] | None = None,
    ) -> None:
        super().__init__(args, app=app, out=out)
        self.stdin = stdin if stdin is not None else sys.stdin.buffer

    @override
    def execute(self) -> int:
        """Format standard input.

        Returns:
            1 on a configuration, parse or I/O error, otherwise 0.
        """
        try:
            self.app.format_stdin(self.request, self.stdin, self.out)
            self.out.flush()
        except (ShellFormatError, OSError) as exc:
            logger.error("%s", exc)
            return 1
        return 0
