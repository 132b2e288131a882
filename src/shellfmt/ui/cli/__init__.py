"""Command line interface package."""

from shellfmt.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
