"""Subcommands of ``pipeline-demo``.

Contents:
    * :mod:`.report` - build report, greeting and timestamp
    * :mod:`.arithmetic` - ``add`` and ``is-even``
    * :mod:`.about` - interpreter version and package metadata
"""

from __future__ import annotations

from .about import cli_env, cli_info
from .arithmetic import cli_add, cli_is_even
from .report import cli_hello, cli_report, cli_timestamp, echo_build_report

#: Registration order is the order ``--help`` lists them in.
ALL_COMMANDS = (cli_report, cli_hello, cli_timestamp, cli_add, cli_is_even, cli_env, cli_info)

__all__ = [
    "ALL_COMMANDS",
    "cli_add",
    "cli_env",
    "cli_hello",
    "cli_info",
    "cli_is_even",
    "cli_report",
    "cli_timestamp",
    "echo_build_report",
]
