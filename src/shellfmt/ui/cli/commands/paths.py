"""src/shellfmt/ui/cli/commands/paths.py
What: Format the files and directories named on the command line.
Why: Bridge parsed arguments with the batch runner and its outcome.
"""

from typing import override

from shellfmt.ui.cli.commands.executor import CommandExecutor


class PathsCommand(CommandExecutor):
    """Command for formatting one or more paths."""

    @override
    def execute(self) -> int:
        """Execute the batch over every path argument.

        Returns:
            1 if any item failed, otherwise 0.
        """
        outcome = self.app.format_paths(self.request, self.args.paths, self.out)
        self.out.flush()
        if self.args.verbose:
            self.summary_display.show_outcome(outcome, quiet=self.args.quiet)
        return 1 if outcome.any_failed else 0
