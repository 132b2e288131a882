"""
Summary: Default script classifier and shebang sniffer adapters.
Why: Give the walker a metadata check and the unit pipeline a cheap content peek.
"""

from __future__ import annotations

import re
from typing import Final, final

from ..usecases.processing_types import FileInfo, ScriptConfidence

SCRIPT_EXTENSION_PATTERN: Final[re.Pattern[str]] = re.compile(r"\.(sh|bash|mksh|bats)$")
SHEBANG_PATTERN: Final[re.Pattern[bytes]] = re.compile(
    rb"^#!\s?/(usr/)?bin/(env\s+)?(sh|bash|mksh|bats)(\s|$)"
)
# Smallest file that can hold a shebang followed by a newline.
MIN_SHEBANG_SIZE: Final[int] = len("#!/bin/sh\n")


@final
class ExtensionScriptClassifier:
    """Classify directory entries by name, type and size."""

    def classify(self, info: FileInfo) -> ScriptConfidence:
        name = info.name
        if info.is_dir or not name or name.startswith("."):
            return ScriptConfidence.NOT_SCRIPT
        if info.is_symlink:
            return ScriptConfidence.NOT_SCRIPT
        if SCRIPT_EXTENSION_PATTERN.search(name):
            return ScriptConfidence.SCRIPT
        if "." in name:
            # some other extension
            return ScriptConfidence.NOT_SCRIPT
        if info.size < MIN_SHEBANG_SIZE:
            return ScriptConfidence.NOT_SCRIPT
        return ScriptConfidence.IF_SHEBANG


@final
class RegexShebangSniffer:
    """Match ``#!/bin/sh``-style interpreter lines, including ``/usr/bin/env``."""

    def matches(self, prefix: bytes) -> bool:
        return SHEBANG_PATTERN.match(prefix) is not None


__all__ = [
    "ExtensionScriptClassifier",
    "MIN_SHEBANG_SIZE",
    "RegexShebangSniffer",
    "SCRIPT_EXTENSION_PATTERN",
    "SHEBANG_PATTERN",
]
