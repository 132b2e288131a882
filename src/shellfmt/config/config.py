"""Configuration management for shellfmt."""

import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from shellfmt.config.paths import default_config_path
from shellfmt.platform.logging import logger


SUPPORTED_LANGUAGES: tuple[str, ...] = ("bash", "posix", "mksh")


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


class ConfigError(ValueError):
    """Raised when the configuration file holds unusable values."""


@dataclass
class Config:
    """Persisted formatter defaults.

    Command line flags take precedence over every value here.
    """

    # Shell dialect handed to the parser
    language: str = "bash"

    # Indentation: 0 for tabs, >0 for that many spaces
    indent: int = 0

    # Binary operators such as && and | may start a line
    binary_next_line: bool = False

    # Apply the simplification pass before rendering
    simplify: bool = False

    # Explicit path to the shfmt executable (looked up on PATH otherwise)
    shfmt_path: Path | None = _path_field()

    # Log file path; no file logging when unset
    log_file: Path | None = _path_field()

    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths and validate scalar settings."""
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value).expanduser() if value.strip() else None)

        if self.language not in SUPPORTED_LANGUAGES:
            raise ConfigError(
                f"Unsupported language {self.language!r}; expected one of {', '.join(SUPPORTED_LANGUAGES)}"
            )
        if isinstance(self.indent, bool) or not isinstance(self.indent, int) or self.indent < 0:
            raise ConfigError(f"indent must be a non-negative integer, got {self.indent!r}")

    @classmethod
    def load(cls, config_file: Path | None = None) -> "Config":
        """Load configuration from file.

        Args:
            config_file: Explicit file to read. Defaults to ``default_config_path()``.

        Returns:
            Config: Loaded configuration object, or defaults when no file exists.
        """
        if cls._instance is not None and config_file in (None, cls._loaded_from):
            return cls._instance

        target = config_file or default_config_path()

        if not target.exists():
            logger.debug("No configuration file at %s; using defaults", target)
            instance = cls()
        else:
            try:
                with open(target, "rb") as f:
                    config_dict = tomllib.load(f)
                known = {f.name for f in fields(cls)}
                unknown = sorted(set(config_dict) - known)
                if unknown:
                    raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")
                instance = cls(**config_dict)
            except (OSError, tomllib.TOMLDecodeError, ConfigError, TypeError) as e:
                logger.error("Failed to load configuration from %s: %s", target, e)
                raise
            logger.debug("Configuration loaded from %s", target)

        cls._instance = instance
        cls._loaded_from = target
        return instance

    @classmethod
    def reset(cls) -> None:
        """Forget the cached instance so the next ``load`` reads from disk."""
        cls._instance = None
        cls._loaded_from = None


__all__ = ["Config", "ConfigError", "SUPPORTED_LANGUAGES"]
