"""
Summary: Format a single program read from standard input.
Why: Stdin has no file identity, so there is nothing to walk or rewrite.
"""

from __future__ import annotations

from typing import IO

from .ports import FormatterPort
from .processing_types import ConfigurationError, FormatOptions

STDIN_SOURCE_NAME = ""


def check_stdin_options(options: FormatOptions) -> None:
    """Reject options that need a file on disk.

    Raises:
        ConfigurationError: ``list_files`` or ``write`` is set.
    """
    if options.list_files or options.write:
        raise ConfigurationError("-w and -l can only be used on files")


def format_stdin(
    options: FormatOptions,
    formatter: FormatterPort,
    stdin: IO[bytes],
    out: IO[bytes],
) -> None:
    """Read all of ``stdin``, format it and write the result to ``out``.

    The option check happens before anything is read. With ``to_json`` the
    parsed (and optionally simplified) tree is printed instead of source.

    Raises:
        ConfigurationError: Invalid options for standard input.
        ParseError: The input is not valid shell.
        FormatterError: Rendering failed.
        OSError: Reading or writing a stream failed.
    """
    check_stdin_options(options)

    src = stdin.read()
    program = formatter.parse(src, STDIN_SOURCE_NAME)
    if options.simplify:
        program = formatter.simplify(program)
    if options.to_json:
        _ = out.write(formatter.to_json(program))
        return
    _ = out.write(formatter.render(program))


__all__ = ["STDIN_SOURCE_NAME", "check_stdin_options", "format_stdin"]
