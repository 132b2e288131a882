"""Display management for CLI interface."""

from shellfmt.ui.cli.display.summary import SummaryDisplay

__all__ = ["SummaryDisplay"]
