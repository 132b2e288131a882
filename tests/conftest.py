"""Shared pytest fixtures: an in-process formatter double and config isolation."""

from __future__ import annotations

import io
import json
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from shellfmt.config.config import Config
from shellfmt.features.formatting import (
    BatchRunner,
    ExtensionScriptClassifier,
    FormatOptions,
    ParseError,
    Program,
    RegexShebangSniffer,
)

_OPENERS: tuple[str, ...] = ("then", "do", "{")
_CLOSERS: tuple[str, ...] = ("fi", "done", "}")


class FakeFormatter:
    """Tiny stand-in for shfmt: re-indents blocks with tabs.

    Lines ending in ``then``/``do``/``{`` open a block and ``fi``/``done``/``}``
    close one. A closer without an opener is a parse error. ``simplify`` drops
    trailing semicolons.
    """

    def __init__(self) -> None:
        self.parsed: list[str] = []
        self.simplified: int = 0

    def parse(self, src: bytes, source_name: str) -> Program:
        self.parsed.append(source_name)
        depth = 0
        lines: list[tuple[int, str]] = []
        for number, raw in enumerate(src.decode("utf-8").splitlines(), start=1):
            line = raw.strip()
            if line.split(" ", 1)[0] in _CLOSERS:
                if depth == 0:
                    raise ParseError(source_name, number, 1, f'"{line}" can only be used to end a block')
                depth -= 1
            lines.append((depth, line))
            if line.endswith(_OPENERS):
                depth += 1
        return Program(tree=lines, source_name=source_name)

    def simplify(self, program: Program) -> Program:
        self.simplified += 1
        tree = [(depth, line.rstrip(";")) for depth, line in program.tree]
        return Program(tree=tree, source_name=program.source_name)

    def render(self, program: Program) -> bytes:
        text = "".join(("\t" * depth + line if line else "") + "\n" for depth, line in program.tree)
        return text.encode("utf-8")

    def to_json(self, program: Program) -> bytes:
        payload = {"Type": "File", "Stmts": [line for _, line in program.tree]}
        return (json.dumps(payload) + "\n").encode("utf-8")


MESSY_SCRIPT = b"#!/bin/sh\nif true; then\n      echo hi\n  fi\n"
CANONICAL_SCRIPT = b"#!/bin/sh\nif true; then\n\techo hi\nfi\n"
BROKEN_SCRIPT = b"echo start\nfi\n"


@pytest.fixture(autouse=True)
def isolated_config(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Point config discovery at an empty location and reset the singleton."""

    config_dir = tmp_path_factory.mktemp("config")
    monkeypatch.setenv("SHELLFMT_CONFIG", str(config_dir / "missing.toml"))
    Config.reset()
    yield None
    Config.reset()


@pytest.fixture
def fake_formatter() -> FakeFormatter:
    return FakeFormatter()


@pytest.fixture
def scripts() -> dict[str, bytes]:
    """Sample script bodies keyed by role."""

    return {
        "messy": MESSY_SCRIPT,
        "canonical": CANONICAL_SCRIPT,
        "broken": BROKEN_SCRIPT,
    }


@pytest.fixture
def make_runner(fake_formatter: FakeFormatter) -> Callable[..., tuple[BatchRunner, io.BytesIO]]:
    """Build a runner around the fake formatter and an in-memory result stream."""

    def _make(**option_overrides: object) -> tuple[BatchRunner, io.BytesIO]:
        out = io.BytesIO()
        runner = BatchRunner(
            options=FormatOptions(**option_overrides),  # type: ignore[arg-type]
            formatter=fake_formatter,
            classifier=ExtensionScriptClassifier(),
            sniffer=RegexShebangSniffer(),
            out=out,
        )
        return runner, out

    return _make


@pytest.fixture
def write_file() -> Callable[[Path, bytes], Path]:
    def _write(path: Path, content: bytes) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        _ = path.write_bytes(content)
        return path

    return _write
