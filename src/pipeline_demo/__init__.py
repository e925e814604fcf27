"""Public package surface for the build-validation demo.

Routes imports through the architectural layers:
- Domain exports: greeting, timestamp, arithmetic and report helpers
- Metadata: package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Domain exports
from .domain.behaviors import (
    CANONICAL_GREETING,
    READY_MESSAGE,
    add,
    build_greeting,
    build_report,
    describe_environment,
    format_timestamp,
    get_current_timestamp,
    is_even,
)
from .domain.errors import OperandError

__all__ = [
    "CANONICAL_GREETING",
    "READY_MESSAGE",
    "OperandError",
    "add",
    "build_greeting",
    "build_report",
    "describe_environment",
    "format_timestamp",
    "get_current_timestamp",
    "is_even",
    "print_info",
]
