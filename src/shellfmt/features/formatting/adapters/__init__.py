"""Concrete collaborators plugged into the formatting use case ports."""

from .script_detection import ExtensionScriptClassifier, RegexShebangSniffer
from .shfmt_formatter import ShfmtFormatter

__all__ = [
    "ExtensionScriptClassifier",
    "RegexShebangSniffer",
    "ShfmtFormatter",
]
