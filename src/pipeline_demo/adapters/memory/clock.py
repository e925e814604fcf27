"""Frozen clock adapter for deterministic timestamps in tests."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Final

DEFAULT_FROZEN_MOMENT: Final[datetime] = datetime(2024, 1, 2, 3, 4, 5)


@dataclass(frozen=True, slots=True)
class FrozenClock:
    """Callable that always reports the same moment.

    Example:
        >>> FrozenClock()().isoformat()
        '2024-01-02T03:04:05'
    """

    moment: datetime = DEFAULT_FROZEN_MOMENT

    def __call__(self) -> datetime:
        return self.moment


__all__ = ["DEFAULT_FROZEN_MOMENT", "FrozenClock"]
