"""Command line argument parsing package."""

from shellfmt.ui.cli.args.options import CLIArgs, FormatArgs
from shellfmt.ui.cli.args.parser import ArgumentParser

__all__ = ["ArgumentParser", "CLIArgs", "FormatArgs"]
