"""Process exit codes for pipeline-demo.

A CI job treats any non-zero code as a failed step. The values follow
sysexits.h and shell signal conventions; lib_cli_exit_tools produces the
signal codes itself, they are listed so callers can compare against them.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes the CLI can finish with.

    Example:
        >>> int(ExitCode.CONFIG_ERROR)
        78
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    USAGE_ERROR = 2
    CONFIG_ERROR = 78
    SIGNAL_INT = 130
    BROKEN_PIPE = 141
    SIGNAL_TERM = 143


__all__ = ["ExitCode"]
