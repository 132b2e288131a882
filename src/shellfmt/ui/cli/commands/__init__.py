"""Command execution package for CLI."""

from shellfmt.ui.cli.commands.executor import CommandExecutor
from shellfmt.ui.cli.commands.paths import PathsCommand
from shellfmt.ui.cli.commands.stdin import StdinCommand

__all__ = [
    "CommandExecutor",
    "PathsCommand",
    "StdinCommand",
]
