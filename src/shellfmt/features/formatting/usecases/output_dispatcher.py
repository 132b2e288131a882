"""
Summary: Apply the configured output actions to a materialised SourceUnit.
Why: Listing and rewriting are independent switches sharing one rule set.
"""

from __future__ import annotations

import contextlib
import os
import stat
import tempfile
from pathlib import Path
from typing import IO

from shellfmt.platform.logging import logger

from .processing_types import FormatEvent, FormatOptions, SourceUnit


def rewrite_in_place(handle: IO[bytes], data: bytes) -> None:
    """Truncate the open file and write ``data`` through the same handle."""

    _ = handle.seek(0)
    _ = handle.truncate(0)
    _ = handle.write(data)
    handle.flush()


def replace_file(path: Path, data: bytes, handle: IO[bytes]) -> None:
    """Replace the contents of ``path`` with ``data``.

    The bytes go to a sibling temporary file which then replaces the target,
    so a failure midway leaves the original untouched. Permission bits and
    ownership are taken from the still-open original and symlinks are
    resolved so the link itself survives. Files with more than one hard link
    are rewritten through the open handle so every link sees the new content.
    The same in-place rewrite is used when the directory does not allow
    creating the sibling.
    """

    target = Path(os.path.realpath(path))
    original = os.fstat(handle.fileno())

    if original.st_nlink > 1:
        logger.debug("%s has %d hard links; rewriting in place", target, original.st_nlink)
        rewrite_in_place(handle, data)
        return

    try:
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{target.name}.",
            suffix=".tmp",
            dir=target.parent,
        )
    except PermissionError:
        logger.debug("Cannot create a temporary file next to %s; rewriting in place", target)
        rewrite_in_place(handle, data)
        return

    try:
        with os.fdopen(fd, "wb") as tmp_handle:
            _ = tmp_handle.write(data)
            tmp_handle.flush()
            os.fsync(tmp_handle.fileno())
        os.chmod(tmp_name, stat.S_IMODE(original.st_mode))
        # Only root may give a file away; other users keep their own ownership.
        with contextlib.suppress(PermissionError):
            os.chown(tmp_name, original.st_uid, original.st_gid)
        os.replace(tmp_name, target)
    except BaseException:
        with contextlib.suppress(FileNotFoundError):
            os.unlink(tmp_name)
        raise


def dispatch_unit(
    unit: SourceUnit,
    options: FormatOptions,
    out: IO[bytes],
    handle: IO[bytes] | None = None,
) -> None:
    """Perform the list/write/print actions selected by ``options``.

    Unchanged units are never listed or rewritten. With neither ``list_files``
    nor ``write`` set, the rendered bytes are printed whether or not they
    differ from the original.

    Raises:
        OSError: Writing to ``out`` or rewriting the file failed.
    """
    if unit.changed:
        if options.list_files:
            _ = out.write(os.fsencode(unit.path) + b"\n")
        if options.write:
            if handle is None:
                raise ValueError("write mode needs the handle the unit was read from")
            replace_file(Path(unit.path), unit.rendered, handle)
            logger.info(
                "Rewrote %s",
                unit.path,
                extra={
                    "format_event": FormatEvent.FILE_WRITE.value,
                    "source_path": unit.path,
                },
            )

    if options.prints_source:
        _ = out.write(unit.rendered)

    logger.debug(
        "%s %s",
        "Changed" if unit.changed else "Unchanged",
        unit.path,
        extra={
            "format_event": (
                FormatEvent.FILE_CHANGED if unit.changed else FormatEvent.FILE_UNCHANGED
            ).value,
            "source_path": unit.path,
        },
    )


__all__ = ["dispatch_unit", "replace_file", "rewrite_in_place"]
