"""Callable seams between the CLI and the outside world.

The CLI touches three things it does not own: the layered configuration
files, the lib_log_rich runtime and the wall clock. Each gets a Protocol
here so tests can hand the CLI deterministic stand-ins.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from lib_layered_config import Config


class LoadConfig(Protocol):
    """Return the merged configuration for this process."""

    def __call__(self, *, start_dir: str | None = ...) -> Config: ...


class InitLogging(Protocol):
    """Start logging from the ``[lib_log_rich]`` section of *config*."""

    def __call__(self, config: Config) -> None: ...


class ReadClock(Protocol):
    """Return the current local wall-clock time."""

    def __call__(self) -> datetime: ...


__all__ = [
    "InitLogging",
    "LoadConfig",
    "ReadClock",
]
