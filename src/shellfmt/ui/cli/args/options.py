"""Command line argument options."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import final

from shellfmt.features.formatting import FormatOptions


@final
@dataclass(slots=True)
class FormatArgs:
    """Validated command line arguments.

    An empty ``paths`` list selects standard-input mode.
    """

    options: FormatOptions
    paths: list[Path] = field(default_factory=list)
    shfmt_path: Path | None = None
    verbose: bool = False
    quiet: bool = False

    @property
    def reads_stdin(self) -> bool:
        return not self.paths


CLIArgs = FormatArgs

__all__ = ["CLIArgs", "FormatArgs"]
