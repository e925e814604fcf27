"""Logging initializer that records what it was given."""

from __future__ import annotations

from dataclasses import dataclass, field

from lib_layered_config import Config

from pipeline_demo.application.ports import InitLogging


@dataclass(slots=True)
class RecordingLogInit:
    """Keep every Config passed in, then hand it to *delegate* if one is set.

    With no delegate nothing is started, which suits callers that never
    reach ``lib_log_rich.runtime.bind``.

    Example:
        >>> init = RecordingLogInit()
        >>> init(Config({}, {}))
        >>> len(init.calls)
        1
    """

    delegate: InitLogging | None = None
    calls: list[Config] = field(default_factory=list)

    def __call__(self, config: Config) -> None:
        self.calls.append(config)
        if self.delegate is not None:
            self.delegate(config)


__all__ = ["RecordingLogInit"]
