"""In-memory stand-ins for the application ports.

Contents:
    * :mod:`.config` - configuration without file discovery
    * :mod:`.logging` - recording logging initializer
    * :mod:`.clock` - frozen clock
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .clock import DEFAULT_FROZEN_MOMENT, FrozenClock
from .config import QUIET_LOGGING_SECTION, load_config_in_memory
from .logging import RecordingLogInit

if TYPE_CHECKING:
    from pipeline_demo.application.ports import InitLogging, LoadConfig, ReadClock

    _load_config: LoadConfig = load_config_in_memory
    _init_logging: InitLogging = RecordingLogInit()
    _read_clock: ReadClock = FrozenClock()

__all__ = [
    "DEFAULT_FROZEN_MOMENT",
    "QUIET_LOGGING_SECTION",
    "FrozenClock",
    "RecordingLogInit",
    "load_config_in_memory",
]
