"""src/shellfmt/ui/cli/commands/executor.py
What: Provide shared wiring for CLI command executors.
Why: Reuse service construction and stream selection across commands.
"""

import sys
from abc import ABC, abstractmethod
from typing import IO

from shellfmt.application.services.format_service import FormatRequest, FormatService
from shellfmt.ui.cli.args.options import FormatArgs
from shellfmt.ui.cli.display.summary import SummaryDisplay


class CommandExecutor(ABC):
    """Base class for command execution."""

    args: FormatArgs
    app: FormatService
    request: FormatRequest
    out: IO[bytes]
    summary_display: SummaryDisplay

    def __init__(
        self,
        args: FormatArgs,
        *,
        app: FormatService | None = None,
        out: IO[bytes] | None = None,
    ) -> None:
        """Initialize command executor.

        Args:
            args: Validated command line arguments.
            app: Service override (tests).
            out: Result stream; defaults to the binary stdout.
        """
        self.args = args
        self.app = app or FormatService()
        self.request = FormatRequest(options=args.options, shfmt_path=args.shfmt_path)
        self.out = out if out is not None else sys.stdout.buffer
        self.summary_display = SummaryDisplay()

    @abstractmethod
    def execute(self) -> int:
        """Execute the command.

        Returns:
            Process exit code.
        """
        pass
