"""Tests for the ``FormatEventRichHandler`` event rendering."""

from __future__ import annotations

import logging
import logging.handlers
from io import StringIO
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.text import Text

from shellfmt.platform.logging import FormatEventRichHandler, LOGGER_NAME, setup_logger


def _make_handler() -> FormatEventRichHandler:
    """Create a handler instance with an in-memory console."""

    console = Console(file=StringIO(), force_terminal=True, soft_wrap=True)
    return FormatEventRichHandler(console=console)


def _build_record(level: int = logging.INFO, **extras: Any) -> logging.LogRecord:
    record = logging.LogRecord(
        name=LOGGER_NAME,
        level=level,
        pathname="test",
        lineno=0,
        msg="",
        args=(),
        exc_info=None,
    )
    for key, value in extras.items():
        setattr(record, key, value)
    return record


def test_file_error_shows_relative_path_and_message() -> None:
    handler = _make_handler()
    base = "/work/repo"

    record = _build_record(
        logging.ERROR,
        format_event="format.file.error",
        source_path=f"{base}/scripts/build.sh",
        source_base_path=base,
        error_message="/work/repo/scripts/build.sh:2:1: unexpected fi",
    )

    rendered = handler.render_message(record, "")
    assert isinstance(rendered, Text)
    assert rendered.plain == "⛔ Failed scripts/build.sh (/work/repo/scripts/build.sh:2:1: unexpected fi)"


def test_long_paths_are_truncated() -> None:
    handler = _make_handler()

    record = _build_record(
        format_event="format.file.write",
        source_path="/srv/deploy/tools/ci/stages/lint/run.sh",
    )

    plain = handler.render_message(record, "").plain
    assert plain.endswith("Rewrote …/ci/stages/lint/run.sh")


def test_batch_complete_lists_metrics() -> None:
    handler = _make_handler()

    record = _build_record(
        format_event="format.batch.complete",
        roots=2,
        processed=5,
        changed=2,
        skipped=1,
        failed=0,
        duration_seconds=1.5,
    )

    plain = handler.render_message(record, "").plain
    assert plain == "✅ Batch complete [processed=5, changed=2, skipped=1, failed=0, duration=1.50s]"


def test_stdin_source_has_readable_name() -> None:
    handler = _make_handler()

    record = _build_record(format_event="format.file.changed", source_path="")

    assert handler.render_message(record, "").plain == "✏ Needs formatting <standard input>"


def test_plain_records_fall_back_to_default_rendering() -> None:
    handler = _make_handler()

    rendered = handler.render_message(_build_record(), "a.sh: [not markup]")

    assert isinstance(rendered, Text)
    assert rendered.plain == "a.sh: [not markup]"


def test_setup_logger_adds_file_handler(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "shellfmt.log"

    logger = setup_logger(log_file=log_file, console_level=logging.ERROR)
    try:
        handlers = logger.handlers
        assert len(handlers) == 2
        assert isinstance(handlers[0], FormatEventRichHandler)
        assert handlers[0].level == logging.ERROR
        assert isinstance(handlers[1], logging.handlers.RotatingFileHandler)
        assert log_file.parent.is_dir()

        logger.debug("written to file only")
        handlers[1].flush()
        assert "written to file only" in log_file.read_text(encoding="utf-8")
    finally:
        _ = setup_logger()


def test_setup_logger_is_idempotent() -> None:
    first = setup_logger()
    second = setup_logger()

    assert first is second
    assert len(second.handlers) == 1
