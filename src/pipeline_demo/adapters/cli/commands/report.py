"""Build report and greeting commands.

Contents:
    * :func:`echo_build_report` - Write the three report lines to stdout.
    * :func:`cli_report` - Print the build report.
    * :func:`cli_hello` - Print the greeting.
    * :func:`cli_timestamp` - Print the current timestamp.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import lib_log_rich.runtime
import rich_click as click

from pipeline_demo.domain.behaviors import (
    build_greeting,
    build_report,
    get_current_timestamp,
)

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import RunState, pass_run_state

if TYPE_CHECKING:
    from pipeline_demo.composition import AppServices

logger = logging.getLogger(__name__)


def echo_build_report(services: AppServices) -> None:
    """Write greeting, completion time and readiness message, one per line."""
    timestamp = get_current_timestamp(services.read_clock)
    for line in build_report(timestamp):
        click.echo(line)


@click.command("report", context_settings=CLICK_CONTEXT_SETTINGS)
@pass_run_state
def cli_report(state: RunState) -> None:
    """Print the build report (same output as running without a command)."""
    with lib_log_rich.runtime.bind(job_id="cli-report", extra={"command": "report"}):
        logger.info("Printing build report")
        echo_build_report(state.services)


@click.command("hello", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_hello() -> None:
    """Print the canonical greeting."""
    with lib_log_rich.runtime.bind(job_id="cli-hello", extra={"command": "hello"}):
        logger.info("Executing hello command")
        click.echo(build_greeting())


@click.command("timestamp", context_settings=CLICK_CONTEXT_SETTINGS)
@pass_run_state
def cli_timestamp(state: RunState) -> None:
    """Print the current local time as YYYY-MM-DD HH:MM:SS."""
    with lib_log_rich.runtime.bind(job_id="cli-timestamp", extra={"command": "timestamp"}):
        logger.info("Reading wall clock")
        click.echo(get_current_timestamp(state.services.read_clock))


__all__ = [
    "cli_hello",
    "cli_report",
    "cli_timestamp",
    "echo_build_report",
]
