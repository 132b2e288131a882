"""Shared path utilities for configuration and log locations.

This module centralizes how the formatter discovers its config and log
files.

Policy (project-local by default):
- Config: ``<project_root>/.shellfmt.toml`` unless overridden by
  ``SHELLFMT_CONFIG``.
- Log file: ``<project_root>/logs/shellfmt.log`` unless overridden by
  ``SHELLFMT_LOG_FILE``.

The project root is found by walking up from the working directory, since
the formatter runs against whatever tree the user invokes it in.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Callable, Final


_ENV_CONFIG_FILE: Final[str] = "SHELLFMT_CONFIG"
_ENV_LOG_FILE: Final[str] = "SHELLFMT_LOG_FILE"
CONFIG_FILE_NAME: Final[str] = ".shellfmt.toml"


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path],
) -> Path:
    """Resolve a configuration path honoring explicit and environment overrides."""

    if explicit_path is not None:
        return Path(explicit_path).expanduser().resolve()

    mapping = env if env is not None else os.environ
    if env_var:
        candidate = mapping.get(env_var) or ""
        candidate = candidate.strip()
        if candidate:
            return Path(candidate).expanduser().resolve()

    default_path = default_factory()
    return default_path.expanduser().resolve()


def _detect_project_root(start: Path | None = None) -> Path:
    """Detect the project root by walking up parents.

    Looks for markers like ``pyproject.toml`` or ``.git``.

    Args:
        start: Starting directory. Defaults to the working directory.

    Returns:
        Path: Detected project root, or ``start`` itself when no marker is
        found.
    """
    here = (start or Path.cwd()).resolve()
    for p in [here, *here.parents]:
        if (p / "pyproject.toml").exists() or (p / ".git").exists():
            return p
    return here


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Get the path of the TOML config file."""

    return resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=_ENV_CONFIG_FILE,
        default_factory=lambda: _detect_project_root() / CONFIG_FILE_NAME,
    )


def default_log_dir() -> Path:
    """Get the default directory for log files."""

    return (_detect_project_root() / "logs").resolve()


def default_log_file(env: Mapping[str, str] | None = None) -> Path:
    """Get the default log file path."""

    return resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=_ENV_LOG_FILE,
        default_factory=lambda: default_log_dir() / "shellfmt.log",
    )


__all__ = [
    "CONFIG_FILE_NAME",
    "default_config_path",
    "default_log_dir",
    "default_log_file",
    "resolve_overridable_path",
]
