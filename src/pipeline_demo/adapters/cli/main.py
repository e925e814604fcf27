"""Run the CLI and turn its outcome into a process exit code.

The console script and ``python -m pipeline_demo`` both end up in
:func:`main`, so a CI job sees the same output and exit codes from either.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Iterator, Sequence
from contextlib import contextmanager
from typing import TYPE_CHECKING

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from pipeline_demo import __init__conf__

from .constants import TRACEBACK_LIMITS
from .context import TracebackFlags

if TYPE_CHECKING:
    from pipeline_demo.composition import AppServices


@contextmanager
def _preserved_traceback_flags(restore: bool) -> Iterator[None]:
    saved = TracebackFlags.current()
    try:
        yield
    finally:
        if restore:
            saved.install()


def _shutdown_logging() -> None:
    # Worker threads share the runtime with the main thread.
    if threading.current_thread() is not threading.main_thread():
        return
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()


def _report_failure(exc: BaseException) -> int:
    """Print *exc* through lib_cli_exit_tools and return the exit code it maps to."""
    verbose = TracebackFlags.current().enabled
    TracebackFlags.requested(verbose).install()
    lib_cli_exit_tools.print_exception_message(trace_back=verbose, length_limit=TRACEBACK_LIMITS[verbose])
    return lib_cli_exit_tools.get_system_exit_code(exc)


def _dispatch(args: list[str], services_factory: Callable[[], AppServices]) -> int:
    from .root import cli

    # lib_cli_exit_tools.run_cli has no way to pass ``obj``, so the run is driven here.
    try:
        cli.main(
            args=args,
            prog_name=__init__conf__.shell_command,
            obj=services_factory,
            standalone_mode=False,
        )
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except BaseException as exc:
        return _report_failure(exc)
    return 0


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Run pipeline-demo with *argv* and return its exit code.

    Args:
        argv: Arguments after the program name. None reads ``sys.argv``.
        restore_traceback: Put the lib_cli_exit_tools traceback flags back
            the way they were once the run ends.
        services_factory: Builds the services for this run, normally
            ``composition.build_production``.

    Raises:
        ValueError: *services_factory* was not given.

    Example:
        >>> from pipeline_demo.composition import build_production
        >>> main(["add", "2", "3"], services_factory=build_production)  # doctest: +SKIP
        5
        0
    """
    if services_factory is None:
        raise ValueError("services_factory is required. Pass build_production from composition layer.")

    args = list(sys.argv[1:] if argv is None else argv)
    with _preserved_traceback_flags(restore_traceback):
        try:
            return _dispatch(args, services_factory)
        finally:
            _shutdown_logging()


__all__ = ["main"]
