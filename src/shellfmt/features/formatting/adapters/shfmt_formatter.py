"""Formatter adapter backed by the ``shfmt`` executable.

Where: features/formatting/adapters/shfmt_formatter.py
What: Implement ``FormatterPort`` by piping bytes through ``shfmt``.
Why: The shell grammar and printer live in shfmt; this module only speaks
its command line. The typed JSON syntax tree (``--to-json``/``--from-json``)
carries the program from one stage to the next.
"""

from __future__ import annotations

import json
import re
import shutil
import subprocess
from pathlib import Path
from typing import Any, Callable, Final, final

from shellfmt.platform.logging import logger

from ..usecases.ports import Program
from ..usecases.processing_types import FormatterError, Language, ParseError

DEFAULT_EXECUTABLE: Final[str] = "shfmt"
_POSITION_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^(?P<name>.*?):(?P<line>\d+):(?P<column>\d+): (?P<message>.+)$"
)

Runner = Callable[..., "subprocess.CompletedProcess[bytes]"]


def find_executable(explicit: Path | str | None = None) -> str | None:
    """Resolve the shfmt executable from an explicit path or ``PATH``."""

    if explicit is not None:
        return str(Path(explicit).expanduser())
    return shutil.which(DEFAULT_EXECUTABLE)


def parse_error_from_stderr(stderr: bytes, source_name: str) -> FormatterError:
    """Turn shfmt's ``name:line:col: message`` diagnostic into a ``ParseError``."""

    text = stderr.decode("utf-8", errors="replace").strip()
    first_line = text.splitlines()[0] if text else ""
    match = _POSITION_PATTERN.match(first_line)
    if match is None:
        return FormatterError(text or "shfmt failed without a diagnostic")
    return ParseError(
        path=source_name,
        line=int(match.group("line")),
        column=int(match.group("column")),
        message=match.group("message"),
    )


@final
class ShfmtFormatter:
    """Parse, simplify and render shell programs with ``shfmt``."""

    def __init__(
        self,
        *,
        language: Language = Language.BASH,
        indent: int = 0,
        binary_next_line: bool = False,
        executable: Path | str | None = None,
        runner: Runner | None = None,
    ) -> None:
        """Create an adapter for one set of parser and printer options.

        Args:
            language: Dialect handed to the parser (``-ln``).
            indent: 0 for tabs, otherwise the number of spaces (``-i``).
            binary_next_line: Let binary operators start a line (``-bn``).
            executable: Explicit shfmt path; looked up on ``PATH`` when omitted.
            runner: Replacement for ``subprocess.run`` (tests).
        """
        self.language: Language = language
        self.indent: int = indent
        self.binary_next_line: bool = binary_next_line
        self.executable: str | None = find_executable(executable)
        self._runner: Runner = runner or subprocess.run

    def parse(self, src: bytes, source_name: str) -> Program:
        args = ["--to-json", "-ln", self.language.value]
        if source_name:
            args.extend(["--filename", source_name])
        completed = self._run(args, src)
        if completed.returncode != 0:
            raise parse_error_from_stderr(completed.stderr, source_name)
        return Program(tree=self._decode_tree(completed.stdout), source_name=source_name)

    def simplify(self, program: Program) -> Program:
        completed = self._run(["--from-json", "-s", "--to-json"], self._encode_tree(program))
        if completed.returncode != 0:
            raise self._failure("simplify", program, completed.stderr)
        return Program(tree=self._decode_tree(completed.stdout), source_name=program.source_name)

    def render(self, program: Program) -> bytes:
        args = ["--from-json", "-i", str(self.indent)]
        if self.binary_next_line:
            args.append("-bn")
        completed = self._run(args, self._encode_tree(program))
        if completed.returncode != 0:
            raise self._failure("render", program, completed.stderr)
        return completed.stdout

    def to_json(self, program: Program) -> bytes:
        return (json.dumps(program.tree, indent=2) + "\n").encode("utf-8")

    def _run(self, args: list[str], stdin: bytes) -> "subprocess.CompletedProcess[bytes]":
        if self.executable is None:
            raise FormatterError(
                "shfmt executable not found; install it (e.g. the shfmt-py package) or pass --shfmt"
            )
        command = [self.executable, *args]
        logger.debug("Running %s", " ".join(command))
        try:
            return self._runner(command, input=stdin, capture_output=True, check=False)
        except OSError as exc:
            raise FormatterError(f"cannot run {self.executable}: {exc}") from exc

    @staticmethod
    def _encode_tree(program: Program) -> bytes:
        return json.dumps(program.tree).encode("utf-8")

    @staticmethod
    def _decode_tree(payload: bytes) -> Any:
        try:
            return json.loads(payload)
        except json.JSONDecodeError as exc:
            raise FormatterError(f"shfmt produced an unreadable syntax tree: {exc}") from exc

    @staticmethod
    def _failure(stage: str, program: Program, stderr: bytes) -> FormatterError:
        detail = stderr.decode("utf-8", errors="replace").strip() or "no diagnostic"
        name = program.source_name or "<standard input>"
        return FormatterError(f"{name}: shfmt {stage} failed: {detail}")


__all__ = [
    "DEFAULT_EXECUTABLE",
    "ShfmtFormatter",
    "find_executable",
    "parse_error_from_stderr",
]
