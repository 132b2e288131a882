# Where: shellfmt.features.formatting.__init__
# What: Expose the batch reformatting engine and its default adapters.
# Why: Provide a cohesive import surface for the application and UI layers.

from .adapters import ExtensionScriptClassifier, RegexShebangSniffer, ShfmtFormatter
from .usecases import (
    BatchRunner,
    ConfigurationError,
    FormatOptions,
    FormatResult,
    FormatterError,
    FormatterPort,
    Language,
    ParseError,
    Program,
    RunOutcome,
    ScriptClassifierPort,
    ShebangSnifferPort,
    ShellFormatError,
    SourceUnit,
    format_stdin,
)

__all__ = [
    "BatchRunner",
    "ConfigurationError",
    "ExtensionScriptClassifier",
    "FormatOptions",
    "FormatResult",
    "FormatterError",
    "FormatterPort",
    "Language",
    "ParseError",
    "Program",
    "RegexShebangSniffer",
    "RunOutcome",
    "ScriptClassifierPort",
    "ShebangSnifferPort",
    "ShellFormatError",
    "ShfmtFormatter",
    "SourceUnit",
    "format_stdin",
]
