"""src/shellfmt/features/formatting/usecases/batch_runner.py
What: Drive walker, unit pipeline and dispatcher over every input path.
Why: One place owns failure aggregation so a bad file never stops the batch.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import IO

from shellfmt.platform.logging import logger

from .format_unit import build_unit, open_source
from .output_dispatcher import dispatch_unit
from .path_walker import walk_candidates
from .ports import FormatterPort, ScriptClassifierPort, ShebangSnifferPort
from .processing_types import (
    Candidate,
    FormatEvent,
    FormatOptions,
    FormatResult,
    FormatterError,
    ParseError,
    RunOutcome,
)


def describe_error(path: Path, exc: BaseException) -> str:
    """Return a one-line diagnostic that always names the offending path."""

    if isinstance(exc, ParseError):
        return str(exc)
    if isinstance(exc, OSError) and exc.filename is not None:
        return str(exc)
    message = str(exc) or type(exc).__name__
    return f"{path}: {message}"


class BatchRunner:
    """Format every candidate under a list of roots, collecting failures.

    Per-item failures are logged as they happen and counted in the
    ``RunOutcome``; they never abort the remaining items or roots.
    """

    def __init__(
        self,
        options: FormatOptions,
        formatter: FormatterPort,
        classifier: ScriptClassifierPort,
        sniffer: ShebangSnifferPort,
        out: IO[bytes],
    ) -> None:
        self.options: FormatOptions = options
        self.formatter: FormatterPort = formatter
        self.classifier: ScriptClassifierPort = classifier
        self.sniffer: ShebangSnifferPort = sniffer
        self.out: IO[bytes] = out

    def run(self, roots: Iterable[Path]) -> RunOutcome:
        """Process every discoverable unit under ``roots``.

        Returns:
            RunOutcome: Counters and per-item results; ``any_failed`` drives
            the exit status.
        """
        root_list = list(roots)
        outcome = RunOutcome(roots=len(root_list))
        logger.info(
            "Batch started [roots=%d]",
            len(root_list),
            extra={"format_event": FormatEvent.BATCH_START.value, "roots": len(root_list)},
        )

        for root in root_list:

            def _on_walk_error(exc: OSError, root: Path = root) -> None:
                failed_path = Path(exc.filename) if exc.filename else root
                self._report_failure(outcome, failed_path, exc, root, event=FormatEvent.ROOT_ERROR)

            for candidate in walk_candidates(root, self.classifier, _on_walk_error):
                self.process_candidate(candidate, root, outcome)

        logger.info(
            "Batch complete [processed=%d, changed=%d, skipped=%d, failed=%d]",
            outcome.processed,
            outcome.changed,
            outcome.skipped,
            outcome.failed,
            extra={"format_event": FormatEvent.BATCH_COMPLETE.value, **outcome.summary_extra()},
        )
        return outcome

    def process_candidate(self, candidate: Candidate, root: Path, outcome: RunOutcome) -> None:
        """Open, format and dispatch one candidate, folding the result into ``outcome``."""

        path = candidate.path
        logger.debug(
            "Formatting %s",
            path,
            extra={
                "format_event": FormatEvent.FILE_START.value,
                "source_path": str(path),
                "source_base_path": str(root),
            },
        )

        try:
            handle = open_source(path, self.options)
        except FileNotFoundError as exc:
            if candidate.explicit:
                self._report_failure(outcome, path, exc, root)
                return
            logger.debug(
                "File vanished before it could be opened: %s",
                path,
                extra={
                    "format_event": FormatEvent.FILE_SKIP_MISSING.value,
                    "source_path": str(path),
                    "source_base_path": str(root),
                },
            )
            outcome.record(FormatResult(source_path=path, skipped=True))
            return
        except OSError as exc:
            self._report_failure(outcome, path, exc, root)
            return

        try:
            with handle:
                unit = build_unit(
                    handle,
                    str(path),
                    self.options,
                    self.formatter,
                    self.sniffer,
                    check_shebang=candidate.check_shebang,
                )
                if unit is not None:
                    dispatch_unit(unit, self.options, self.out, handle)
        except (OSError, FormatterError) as exc:
            self._report_failure(outcome, path, exc, root)
            return

        if unit is None:
            logger.debug(
                "No shell shebang in %s",
                path,
                extra={
                    "format_event": FormatEvent.FILE_SKIP_SHEBANG.value,
                    "source_path": str(path),
                    "source_base_path": str(root),
                },
            )
            outcome.record(FormatResult(source_path=path, skipped=True))
            return

        outcome.record(FormatResult(source_path=path, success=True, changed=unit.changed))

    def _report_failure(
        self,
        outcome: RunOutcome,
        path: Path,
        exc: BaseException,
        root: Path,
        *,
        event: FormatEvent = FormatEvent.FILE_ERROR,
    ) -> None:
        message = describe_error(path, exc)
        logger.error(
            "%s",
            message,
            extra={
                "format_event": event.value,
                "source_path": str(path),
                "source_base_path": str(root),
                "error_message": message,
            },
        )
        outcome.record_failure(path, message)


__all__ = ["BatchRunner", "describe_error"]
