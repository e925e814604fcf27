"""Per-run state shared between the root group and its subcommands.

Contents:
    * :class:`RunState` - what the root group prepared for this run.
    * :data:`pass_run_state` - decorator handing ``RunState`` to a command.
    * :class:`TracebackFlags` - lib_cli_exit_tools traceback switches.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

if TYPE_CHECKING:
    from pipeline_demo.composition import AppServices


@dataclass(frozen=True, slots=True)
class RunState:
    """Services, loaded configuration and the ``--traceback`` choice of one run."""

    services: AppServices
    config: Config
    traceback: bool = False


#: Finds the RunState the root group stored on the context chain.
pass_run_state = click.make_pass_decorator(RunState)


@dataclass(frozen=True, slots=True)
class TracebackFlags:
    """The ``traceback`` and ``traceback_force_color`` switches of lib_cli_exit_tools.

    Example:
        >>> saved = TracebackFlags.current()
        >>> TracebackFlags.requested(True).install()
        >>> TracebackFlags.current()
        TracebackFlags(enabled=True, force_color=True)
        >>> saved.install()
    """

    enabled: bool = False
    force_color: bool = False

    @classmethod
    def current(cls) -> TracebackFlags:
        settings = lib_cli_exit_tools.config
        return cls(
            enabled=bool(getattr(settings, "traceback", False)),
            force_color=bool(getattr(settings, "traceback_force_color", False)),
        )

    @classmethod
    def requested(cls, enabled: bool) -> TracebackFlags:
        """Flags for a ``--traceback`` choice; colour is forced whenever tracebacks are on."""
        return cls(enabled=enabled, force_color=enabled)

    def install(self) -> None:
        lib_cli_exit_tools.config.traceback = self.enabled
        lib_cli_exit_tools.config.traceback_force_color = self.force_color


__all__ = [
    "RunState",
    "TracebackFlags",
    "pass_run_state",
]
