from __future__ import annotations

from io import StringIO
from pathlib import Path

from rich.console import Console

from shellfmt.features.formatting import FormatResult, RunOutcome
from shellfmt.ui.cli.display.summary import SummaryDisplay


def _display() -> tuple[SummaryDisplay, StringIO]:
    buffer = StringIO()
    display = SummaryDisplay()
    display.console = Console(file=buffer, width=200)
    return display, buffer


def _outcome() -> RunOutcome:
    outcome = RunOutcome(roots=1)
    outcome.record(FormatResult(source_path=Path("a.sh"), success=True, changed=True))
    outcome.record(FormatResult(source_path=Path("b.sh"), skipped=True))
    outcome.record_failure(Path("c.sh"), "c.sh:1:1: [bad] token")
    return outcome


def test_show_outcome_lists_counters_and_failures() -> None:
    display, buffer = _display()

    display.show_outcome(_outcome())

    text = buffer.getvalue()
    assert "Files formatted: 1" in text
    assert "Needing changes: 1" in text
    assert "Skipped: 1" in text
    assert "Failed: 1" in text
    assert "c.sh:1:1: [bad] token" in text


def test_quiet_prints_nothing() -> None:
    display, buffer = _display()

    display.show_outcome(_outcome(), quiet=True)

    assert buffer.getvalue() == ""
