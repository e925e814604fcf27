"""Command-line interface of pipeline-demo.

Contents:
    * :func:`cli` - root command group (:mod:`.root`)
    * :func:`main` - entry point returning an exit code (:mod:`.main`)
    * :class:`ExitCode` - exit codes (:mod:`.exit_codes`)
    * :class:`RunState`, :class:`TracebackFlags` - run state (:mod:`.context`)
"""

from __future__ import annotations

from .commands import (
    cli_add,
    cli_env,
    cli_hello,
    cli_info,
    cli_is_even,
    cli_report,
    cli_timestamp,
)
from .context import RunState, TracebackFlags
from .exit_codes import ExitCode
from .main import main
from .root import LoggingConfigError, cli

__all__ = [
    "ExitCode",
    "LoggingConfigError",
    "RunState",
    "TracebackFlags",
    "cli",
    "cli_add",
    "cli_env",
    "cli_hello",
    "cli_info",
    "cli_is_even",
    "cli_report",
    "cli_timestamp",
    "main",
]
