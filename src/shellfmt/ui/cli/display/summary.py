"""src/shellfmt/ui/cli/display/summary.py
What: Render the end-of-run summary for batch formatting.
Why: Give verbose runs a compact tally without touching the result stream.
"""

from __future__ import annotations

from typing import final

from rich.console import Console
from rich.markup import escape

from shellfmt.features.formatting import RunOutcome


@final
class SummaryDisplay:
    """Prints run summaries to stderr."""

    console: Console

    def __init__(self) -> None:
        """Initialize summary display."""
        self.console = Console(stderr=True)

    def show_outcome(self, outcome: RunOutcome, quiet: bool = False) -> None:
        """Display the counters of a batch run and list failed items.

        Args:
            outcome: Finished batch outcome.
            quiet: Whether to suppress non-error output.
        """
        if quiet:
            return

        self.console.print("\n[bold]Formatting Summary:[/bold]")
        self.console.print(f"Files formatted: {outcome.processed}")
        self.console.print(f"[yellow]Needing changes: {outcome.changed}[/yellow]")
        self.console.print(f"Skipped: {outcome.skipped}")

        failures = [result for result in outcome.results if not result.success and not result.skipped]
        if not failures:
            return

        self.console.print(f"[red]Failed: {len(failures)}[/red]")
        for failed in failures:
            self.console.print(f"[red]  • {escape(failed.error_message or str(failed.source_path))}[/red]")
