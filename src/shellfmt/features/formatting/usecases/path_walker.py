"""
Summary: Enumerate formatting candidates beneath the paths given on the command line.
Why: Separate discovery and VCS pruning from per-file processing.
"""

from __future__ import annotations

import os
import stat
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Final

from .ports import ScriptClassifierPort
from .processing_types import Candidate, FileInfo, ScriptConfidence

VCS_DIR_NAMES: Final[frozenset[str]] = frozenset({".git", ".svn", ".hg"})

ErrorCallback = Callable[[OSError], None]


def file_info_for(path: Path) -> FileInfo:
    """Build classifier metadata for ``path`` without following symlinks."""

    st = os.lstat(path)
    return FileInfo(
        path=path,
        name=path.name,
        is_dir=stat.S_ISDIR(st.st_mode),
        is_symlink=stat.S_ISLNK(st.st_mode),
        size=st.st_size,
    )


def walk_candidates(
    root: Path,
    classifier: ScriptClassifierPort,
    on_error: ErrorCallback,
) -> Iterator[Candidate]:
    """Yield the candidates found under ``root``.

    A root that is not a directory is yielded as-is and marked explicit:
    files named on the command line are always formatted. Directories are
    walked depth-first with the entries of each directory visited in one
    sorted sequence, so ``a/x.sh`` comes before ``b.sh``. ``.git``, ``.svn``
    and ``.hg`` subtrees are skipped entirely.

    Args:
        root: File or directory given by the user.
        classifier: Metadata-only eligibility check for discovered files.
        on_error: Receives traversal errors; enumeration continues afterwards.
    """
    try:
        root_stat = os.stat(root)
    except OSError as exc:
        on_error(exc)
        return

    if not stat.S_ISDIR(root_stat.st_mode):
        yield Candidate(path=root, explicit=True)
        return

    if root.name in VCS_DIR_NAMES:
        return

    yield from _walk_directory(root, classifier, on_error)


def _walk_directory(
    directory: Path,
    classifier: ScriptClassifierPort,
    on_error: ErrorCallback,
) -> Iterator[Candidate]:
    try:
        with os.scandir(directory) as entries:
            names = sorted(entry.name for entry in entries)
    except OSError as exc:
        on_error(exc)
        return

    for name in names:
        entry = directory / name
        try:
            info = file_info_for(entry)
        except FileNotFoundError:
            continue
        except OSError as exc:
            on_error(exc)
            continue

        if info.is_dir:
            if name not in VCS_DIR_NAMES:
                yield from _walk_directory(entry, classifier, on_error)
            continue

        confidence = classifier.classify(info)
        if confidence is ScriptConfidence.NOT_SCRIPT:
            continue
        yield Candidate(
            path=entry,
            check_shebang=confidence is ScriptConfidence.IF_SHEBANG,
        )


__all__ = ["VCS_DIR_NAMES", "file_info_for", "walk_candidates"]
