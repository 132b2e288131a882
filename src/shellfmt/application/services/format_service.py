"""Application service for formatting shell scripts.

This layer centralizes construction of the engine's collaborators
so the CLI (and any other front end) only deals with requests and outcomes.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import IO, Callable, final

from shellfmt.features.formatting import (
    BatchRunner,
    ExtensionScriptClassifier,
    FormatOptions,
    FormatterPort,
    RegexShebangSniffer,
    RunOutcome,
    ScriptClassifierPort,
    ShebangSnifferPort,
    ShfmtFormatter,
    format_stdin,
)
from shellfmt.features.formatting.usecases import check_stdin_options


@dataclass(frozen=True)
class FormatRequest:
    """Input parameters for a formatting run.

    Attributes:
        options: Run-wide formatting options.
        shfmt_path: Explicit shfmt executable; ``PATH`` lookup when None.
    """

    options: FormatOptions
    shfmt_path: Path | None = None


def _default_formatter(request: FormatRequest) -> FormatterPort:
    return ShfmtFormatter(
        language=request.options.language,
        indent=request.options.indent,
        binary_next_line=request.options.binary_next_line,
        executable=request.shfmt_path,
    )


@final
class FormatService:
    """Application service that wires the batch engine to its collaborators."""

    def __init__(
        self,
        *,
        formatter_factory: Callable[[FormatRequest], FormatterPort] | None = None,
        classifier_factory: Callable[[], ScriptClassifierPort] | None = None,
        sniffer_factory: Callable[[], ShebangSnifferPort] | None = None,
    ) -> None:
        """Create a service with overridable collaborator factories.

        Tests can inject light-weight doubles while production code relies on
        shfmt and the default detection heuristics.
        """
        self._formatter_factory: Callable[[FormatRequest], FormatterPort] = (
            formatter_factory or _default_formatter
        )
        self._classifier_factory: Callable[[], ScriptClassifierPort] = (
            classifier_factory or ExtensionScriptClassifier
        )
        self._sniffer_factory: Callable[[], ShebangSnifferPort] = (
            sniffer_factory or RegexShebangSniffer
        )

    def build_runner(self, request: FormatRequest, out: IO[bytes]) -> BatchRunner:
        """Build a ``BatchRunner`` configured for ``request``."""

        return BatchRunner(
            options=request.options,
            formatter=self._formatter_factory(request),
            classifier=self._classifier_factory(),
            sniffer=self._sniffer_factory(),
            out=out,
        )

    def format_paths(
        self,
        request: FormatRequest,
        paths: Sequence[Path],
        out: IO[bytes],
    ) -> RunOutcome:
        """Format every script found under ``paths``."""

        return self.build_runner(request, out).run(paths)

    def format_stdin(self, request: FormatRequest, stdin: IO[bytes], out: IO[bytes]) -> None:
        """Format standard input; options are validated before the formatter is built."""

        check_stdin_options(request.options)
        format_stdin(request.options, self._formatter_factory(request), stdin, out)


__all__ = ["FormatRequest", "FormatService"]
