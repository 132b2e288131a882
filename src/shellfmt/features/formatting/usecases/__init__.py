"""Use cases of the formatting feature: discovery, per-unit pipeline and batch driver."""

from .batch_runner import BatchRunner, describe_error
from .format_unit import SHEBANG_PEEK_SIZE, build_unit, open_source
from .output_dispatcher import dispatch_unit, replace_file
from .path_walker import VCS_DIR_NAMES, walk_candidates
from .ports import FormatterPort, Program, ScriptClassifierPort, ShebangSnifferPort
from .processing_types import (
    Candidate,
    ConfigurationError,
    FileInfo,
    FormatEvent,
    FormatOptions,
    FormatResult,
    FormatterError,
    Language,
    ParseError,
    RunOutcome,
    ScriptConfidence,
    ShellFormatError,
    SourceUnit,
)
from .stdin_runner import check_stdin_options, format_stdin

__all__ = [
    "BatchRunner",
    "Candidate",
    "ConfigurationError",
    "FileInfo",
    "FormatEvent",
    "FormatOptions",
    "FormatResult",
    "FormatterError",
    "FormatterPort",
    "Language",
    "ParseError",
    "Program",
    "RunOutcome",
    "SHEBANG_PEEK_SIZE",
    "ScriptClassifierPort",
    "ScriptConfidence",
    "ShebangSnifferPort",
    "ShellFormatError",
    "SourceUnit",
    "VCS_DIR_NAMES",
    "build_unit",
    "check_stdin_options",
    "describe_error",
    "dispatch_unit",
    "format_stdin",
    "open_source",
    "replace_file",
    "walk_candidates",
]
