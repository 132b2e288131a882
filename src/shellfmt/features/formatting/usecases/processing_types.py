"""src/shellfmt/features/formatting/usecases/processing_types.py
Where: Formatting feature usecases layer.
What: Shared enums, value objects and errors for the reformatting flow.
Why: Keep the pipeline modules free of type clutter.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import Enum, StrEnum
from pathlib import Path
from typing import Any


class FormatEvent(StrEnum):
    """Structured event identifiers for formatter logs."""

    BATCH_START = "format.batch.start"
    BATCH_COMPLETE = "format.batch.complete"
    ROOT_ERROR = "format.root.error"
    FILE_START = "format.file.start"
    FILE_UNCHANGED = "format.file.unchanged"
    FILE_CHANGED = "format.file.changed"
    FILE_WRITE = "format.file.write"
    FILE_SKIP_SHEBANG = "format.file.skip.shebang"
    FILE_SKIP_MISSING = "format.file.skip.missing"
    FILE_ERROR = "format.file.error"


class Language(StrEnum):
    """Shell dialects understood by the parser."""

    BASH = "bash"
    POSIX = "posix"
    MKSH = "mksh"


class ScriptConfidence(Enum):
    """How sure the classifier is that a directory entry is a shell script."""

    NOT_SCRIPT = "not_script"
    IF_SHEBANG = "if_shebang"
    SCRIPT = "script"


@dataclass(frozen=True, slots=True)
class FormatOptions:
    """Run-wide settings, built once per invocation and shared read-only.

    ``list_files`` and ``write`` are independent switches. With neither set
    every unit's rendered bytes go to the result stream.
    """

    list_files: bool = False
    write: bool = False
    simplify: bool = False
    language: Language = Language.BASH
    indent: int = 0
    binary_next_line: bool = False
    to_json: bool = False

    @property
    def prints_source(self) -> bool:
        """Whether rendered bytes are streamed to the result output."""

        return not self.list_files and not self.write


@dataclass(frozen=True, slots=True)
class FileInfo:
    """Metadata the script classifier looks at for one directory entry."""

    path: Path
    name: str
    is_dir: bool
    is_symlink: bool
    size: int


@dataclass(frozen=True, slots=True)
class Candidate:
    """A path yielded by the walker, possibly pending a shebang check.

    ``explicit`` marks a file named directly on the command line rather than
    one discovered inside a directory.
    """

    path: Path
    check_shebang: bool = False
    explicit: bool = False


@dataclass(frozen=True, slots=True)
class SourceUnit:
    """One fully materialised item: its original and canonical bytes."""

    path: str
    original: bytes
    rendered: bytes

    @property
    def changed(self) -> bool:
        return self.original != self.rendered


@dataclass(slots=True)
class FormatResult:
    """Outcome of pushing one candidate through the pipeline."""

    source_path: Path
    success: bool = False
    changed: bool = False
    skipped: bool = False
    error_message: str | None = None


@dataclass(slots=True)
class RunOutcome:
    """Bookkeeping for a batch run; owned and updated only by the runner."""

    roots: int = 0
    start_time: float = field(default_factory=time.perf_counter)
    processed: int = 0
    changed: int = 0
    skipped: int = 0
    failed: int = 0
    results: list[FormatResult] = field(default_factory=list)

    @property
    def any_failed(self) -> bool:
        return self.failed > 0

    def record(self, result: FormatResult) -> None:
        """Fold a per-item result into the counters."""

        self.results.append(result)
        if result.skipped:
            self.skipped += 1
        elif not result.success:
            self.failed += 1
        else:
            self.processed += 1
            if result.changed:
                self.changed += 1

    def record_failure(self, path: Path, error_message: str) -> None:
        """Record a failure that happened outside any unit (e.g. while walking)."""

        self.record(FormatResult(source_path=path, success=False, error_message=error_message))

    def duration_seconds(self) -> float:
        return time.perf_counter() - self.start_time

    def summary_extra(self) -> dict[str, Any]:
        """Return a dictionary suitable for structured logging extras."""

        return {
            "roots": self.roots,
            "processed": self.processed,
            "changed": self.changed,
            "skipped": self.skipped,
            "failed": self.failed,
            "duration_seconds": round(self.duration_seconds(), 4),
        }


class ShellFormatError(Exception):
    """Base class for every error raised by the formatting feature."""


class ConfigurationError(ShellFormatError):
    """Raised for flag combinations that make the whole run meaningless."""


class FormatterError(ShellFormatError):
    """Raised when the external formatter cannot parse or render a unit."""


class ParseError(FormatterError):
    """Syntax error reported by the parser, with its source position."""

    def __init__(self, path: str, line: int, column: int, message: str) -> None:
        self.path: str = path
        self.line: int = line
        self.column: int = column
        self.message: str = message
        super().__init__(str(self))

    def __str__(self) -> str:
        location = f"{self.line}:{self.column}"
        if self.path:
            location = f"{self.path}:{location}"
        return f"{location}: {self.message}"


__all__ = [
    "Candidate",
    "ConfigurationError",
    "FileInfo",
    "FormatEvent",
    "FormatOptions",
    "FormatResult",
    "FormatterError",
    "Language",
    "ParseError",
    "RunOutcome",
    "ScriptConfidence",
    "ShellFormatError",
    "SourceUnit",
]
