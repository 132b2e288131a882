from __future__ import annotations

from pathlib import Path

import pytest

from shellfmt.config import paths


def test_config_path_env_override(tmp_path: Path) -> None:
    target = tmp_path / "custom.toml"

    assert paths.default_config_path({"SHELLFMT_CONFIG": str(target)}) == target.resolve()


def test_config_path_defaults_to_project_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / ".git").mkdir()
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    monkeypatch.chdir(nested)

    assert paths.default_config_path({}) == (tmp_path / paths.CONFIG_FILE_NAME).resolve()


def test_blank_env_value_is_ignored(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    _ = (tmp_path / "pyproject.toml").write_text("", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    assert paths.default_log_file({"SHELLFMT_LOG_FILE": "   "}) == (
        tmp_path / "logs" / "shellfmt.log"
    ).resolve()


def test_log_file_env_override(tmp_path: Path) -> None:
    target = tmp_path / "run.log"

    assert paths.default_log_file({"SHELLFMT_LOG_FILE": str(target)}) == target.resolve()


def test_explicit_path_wins(tmp_path: Path) -> None:
    resolved = paths.resolve_overridable_path(
        explicit_path=tmp_path / "explicit.toml",
        env={"X": str(tmp_path / "env.toml")},
        env_var="X",
        default_factory=lambda: tmp_path / "default.toml",
    )

    assert resolved == (tmp_path / "explicit.toml").resolve()
