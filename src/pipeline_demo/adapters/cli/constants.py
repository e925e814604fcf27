"""Settings shared by the root group, its commands and the entry point."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Final

CLICK_CONTEXT_SETTINGS: Final[dict[str, Any]] = {"help_option_names": ["-h", "--help"]}

#: Commands taking integer operands read ``-1`` as a value, not an option.
INTEGER_OPERAND_SETTINGS: Final[dict[str, Any]] = {**CLICK_CONTEXT_SETTINGS, "ignore_unknown_options": True}

#: Characters of exception output lib_cli_exit_tools prints, keyed by whether ``--traceback`` is on.
TRACEBACK_LIMITS: Final[Mapping[bool, int]] = MappingProxyType({False: 500, True: 10_000})

__all__ = [
    "CLICK_CONTEXT_SETTINGS",
    "INTEGER_OPERAND_SETTINGS",
    "TRACEBACK_LIMITS",
]
