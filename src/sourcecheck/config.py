"""ContextVar-based check configuration for sourcecheck.

Provides thread-local configuration using Python's ContextVars (PEP 567).
The command line builds one CheckConfig and sets it for the whole run;
library callers may pass a config explicitly instead.

Thread Safety:
    ContextVars are thread-local by design. Pool threads do not see values
    set in the caller's context, so the CLI hands the config to workers
    explicitly.

Usage:
    from sourcecheck.config import CheckConfig, check_config_context

    with check_config_context(CheckConfig(chunk_size=4096)):
        result = check_file("main.cpp")

    # From a pyproject.toml [tool.sourcecheck] table
    config = load_config("pyproject.toml")

"""

from __future__ import annotations

import os
import tomllib
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields, replace
from typing import Any

from sourcecheck.errors import ConfigError

DEFAULT_CHUNK_SIZE = 64 * 1024

# TOML table holding sourcecheck settings
TOOL_TABLE = "sourcecheck"


@dataclass(frozen=True, slots=True)
class CheckConfig:
    """Immutable check configuration.

    Attributes:
        chunk_size: Bytes read from a file per block
        announce: Print "Checking <file>" before each file
        summary: Print per-file counters after the incidents
        keep_going: Continue with the next file after an I/O failure
        strict: Fail the run when any incident was reported
        jobs: Number of files checked concurrently

    """

    chunk_size: int = DEFAULT_CHUNK_SIZE
    announce: bool = True
    summary: bool = False
    keep_going: bool = False
    strict: bool = False
    jobs: int = 1

    def __post_init__(self) -> None:
        for name in ("announce", "summary", "keep_going", "strict"):
            if not isinstance(getattr(self, name), bool):
                raise ConfigError("expected a boolean", key=name)
        for name in ("chunk_size", "jobs"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ConfigError("expected a positive integer", key=name)

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> CheckConfig:
        """Create CheckConfig from a mapping.

        Keys may use dashes or underscores ("keep-going" or "keep_going").
        Unknown keys are silently ignored.

        Example:
            >>> CheckConfig.from_dict({"chunk-size": 4096, "other": 1}).chunk_size
            4096

        """
        valid_fields = {f.name for f in fields(cls)}
        filtered = {}
        for key, value in config_dict.items():
            name = str(key).replace("-", "_")
            if name in valid_fields:
                filtered[name] = value
        return cls(**filtered)

    def merged(self, **overrides: Any) -> CheckConfig:
        """Copy with the given fields replaced; None values are skipped."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes) if changes else self


def load_config(path: str | os.PathLike[str]) -> CheckConfig:
    """Read ``[tool.sourcecheck]`` from a TOML file.

    A file without the table yields the defaults.

    Raises:
        ConfigError: If the file cannot be read or parsed, or a value is invalid.
    """
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except OSError as e:
        raise ConfigError(f"cannot read {os.fspath(path)}: {e.strerror or e}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"invalid TOML in {os.fspath(path)}: {e}") from e

    tool = data.get("tool", {})
    if not isinstance(tool, dict):
        raise ConfigError("[tool] must be a table")
    table = tool.get(TOOL_TABLE, {})
    if not isinstance(table, dict):
        raise ConfigError(f"[tool.{TOOL_TABLE}] must be a table")
    return CheckConfig.from_dict(table)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: CheckConfig = CheckConfig()

_check_config: ContextVar[CheckConfig] = ContextVar(
    "check_config",
    default=_DEFAULT_CONFIG,
)


def get_check_config() -> CheckConfig:
    """Get current check configuration (thread-local)."""
    return _check_config.get()


def set_check_config(config: CheckConfig) -> None:
    """Set check configuration for current context."""
    _check_config.set(config)


def reset_check_config() -> None:
    """Reset to default configuration."""
    _check_config.set(_DEFAULT_CONFIG)


@contextmanager
def check_config_context(config: CheckConfig) -> Iterator[CheckConfig]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with check_config_context(CheckConfig(summary=True)):
        ...     get_check_config().summary
        True

    """
    previous = _check_config.get()
    _check_config.set(config)
    try:
        yield config
    finally:
        _check_config.set(previous)


__all__ = [
    "CheckConfig",
    "DEFAULT_CHUNK_SIZE",
    "check_config_context",
    "get_check_config",
    "load_config",
    "reset_check_config",
    "set_check_config",
]
