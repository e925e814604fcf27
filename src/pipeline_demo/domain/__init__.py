"""Domain layer - pure business logic with no framework dependencies.

Contents:
    * :mod:`.behaviors` - Greeting, timestamp, arithmetic and report helpers
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .behaviors import (
    BUILD_COMPLETED_PREFIX,
    CANONICAL_GREETING,
    ENVIRONMENT_PREFIX,
    READY_MESSAGE,
    TIMESTAMP_FORMAT,
    add,
    build_greeting,
    build_report,
    describe_environment,
    format_timestamp,
    get_current_timestamp,
    is_even,
)
from .errors import OperandError

__all__ = [
    # Behaviors
    "BUILD_COMPLETED_PREFIX",
    "CANONICAL_GREETING",
    "ENVIRONMENT_PREFIX",
    "READY_MESSAGE",
    "TIMESTAMP_FORMAT",
    "add",
    "build_greeting",
    "build_report",
    "describe_environment",
    "format_timestamp",
    "get_current_timestamp",
    "is_even",
    # Errors
    "OperandError",
]
