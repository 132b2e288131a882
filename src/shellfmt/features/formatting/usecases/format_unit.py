# Where: features/formatting/usecases/format_unit.py
# What: Per-item pipeline turning an open source into a SourceUnit.
# Why: Keep parse/simplify/render and the shebang peek out of the batch loop.
# Assumptions:
# - The caller owns the file handle and keeps it open until dispatch finishes.
# - Formatter adapters raise ParseError/FormatterError, never return None.

from __future__ import annotations

from pathlib import Path
from typing import IO, Final

from .ports import FormatterPort, ShebangSnifferPort
from .processing_types import FormatOptions, SourceUnit

SHEBANG_PEEK_SIZE: Final[int] = 32


def open_source(path: Path, options: FormatOptions) -> IO[bytes]:
    """Open ``path`` for the whole read/compare/rewrite sequence.

    Write mode asks for read-write access up front so permission problems
    surface before any formatting work is done.
    """

    return open(path, "r+b" if options.write else "rb")


def read_source(
    handle: IO[bytes],
    sniffer: ShebangSnifferPort,
    *,
    check_shebang: bool,
) -> bytes | None:
    """Read the full content, or return None if the shebang peek rejects it."""

    prefix = b""
    if check_shebang:
        prefix = handle.read(SHEBANG_PEEK_SIZE)
        if not sniffer.matches(prefix):
            return None
    return prefix + handle.read()


def render_source(
    src: bytes,
    source_name: str,
    options: FormatOptions,
    formatter: FormatterPort,
) -> bytes:
    """Run parse, optional simplify and render over ``src``."""

    program = formatter.parse(src, source_name)
    if options.simplify:
        program = formatter.simplify(program)
    return formatter.render(program)


def build_unit(
    handle: IO[bytes],
    path: str,
    options: FormatOptions,
    formatter: FormatterPort,
    sniffer: ShebangSnifferPort,
    *,
    check_shebang: bool = False,
) -> SourceUnit | None:
    """Materialise the SourceUnit for an already opened item.

    Returns:
        The unit, or None when ``check_shebang`` is set and the content does
        not start with a shell shebang. That skip is not an error.

    Raises:
        ParseError: The content is not valid shell for the selected dialect.
        FormatterError: The formatter failed to simplify or render.
        OSError: Reading the handle failed.
    """
    original = read_source(handle, sniffer, check_shebang=check_shebang)
    if original is None:
        return None
    rendered = render_source(original, path, options, formatter)
    return SourceUnit(path=path, original=original, rendered=rendered)


__all__ = [
    "SHEBANG_PEEK_SIZE",
    "build_unit",
    "open_source",
    "read_source",
    "render_source",
]
