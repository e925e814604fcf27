"""Application layer: the ports the CLI depends on."""

from __future__ import annotations

from .ports import InitLogging, LoadConfig, ReadClock

__all__ = [
    "InitLogging",
    "LoadConfig",
    "ReadClock",
]
