"""Composition root: the one place adapters are chosen."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..adapters.config.loader import load_config
from ..adapters.logging.setup import init_logging
from ..application.ports import InitLogging, LoadConfig, ReadClock


@dataclass(frozen=True, slots=True)
class AppServices:
    """Port implementations one CLI run works with."""

    load_config: LoadConfig
    init_logging: InitLogging
    read_clock: ReadClock


def build_production() -> AppServices:
    """Layered config files, the real lib_log_rich runtime and the wall clock."""
    return AppServices(
        load_config=load_config,
        init_logging=init_logging,
        read_clock=datetime.now,
    )


def build_testing(*, frozen_at: datetime | None = None) -> AppServices:
    """In-memory config, a recording logging initializer and a frozen clock.

    Args:
        frozen_at: Moment the clock reports. Defaults to
            ``DEFAULT_FROZEN_MOMENT``.

    Example:
        >>> build_testing(frozen_at=datetime(2030, 1, 1)).read_clock().year
        2030
    """
    from ..adapters.memory import FrozenClock, RecordingLogInit, load_config_in_memory

    clock = FrozenClock() if frozen_at is None else FrozenClock(frozen_at)
    return AppServices(
        load_config=load_config_in_memory,
        init_logging=RecordingLogInit(),
        read_clock=clock,
    )


__all__ = [
    "AppServices",
    "build_production",
    "build_testing",
]
