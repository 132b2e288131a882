"""Summary: Ports defining the formatting use case's external collaborators.
Why: Keep the batch engine ignorant of how parsing and detection work."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from .processing_types import FileInfo, ScriptConfidence


@dataclass(frozen=True, slots=True)
class Program:
    """Opaque parsed program handed between formatter stages.

    ``tree`` is whatever the formatter adapter needs to carry between its
    parse, simplify and render stages; the engine never looks inside.
    """

    tree: Any
    source_name: str = ""


@runtime_checkable
class FormatterPort(Protocol):
    """Port for the parser, simplifier and printer."""

    def parse(self, src: bytes, source_name: str) -> Program:
        """Parse ``src``; raise ``ParseError`` with a position on bad syntax."""
        ...

    def simplify(self, program: Program) -> Program:
        """Return the simplified form of ``program``."""
        ...

    def render(self, program: Program) -> bytes:
        """Print ``program`` in canonical form."""
        ...

    def to_json(self, program: Program) -> bytes:
        """Serialise the syntax tree of ``program`` as JSON."""
        ...


@runtime_checkable
class ScriptClassifierPort(Protocol):
    """Port for the cheap, metadata-only eligibility check."""

    def classify(self, info: FileInfo) -> ScriptConfidence:
        """Decide whether a directory entry may hold a shell script."""
        ...


@runtime_checkable
class ShebangSnifferPort(Protocol):
    """Port for the content peek performed on ``IF_SHEBANG`` candidates."""

    def matches(self, prefix: bytes) -> bool:
        """Return True when ``prefix`` starts with a recognised shell shebang."""
        ...


__all__ = [
    "FormatterPort",
    "Program",
    "ScriptClassifierPort",
    "ShebangSnifferPort",
]
