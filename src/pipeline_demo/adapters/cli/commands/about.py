"""Commands describing what is running: the interpreter and the package."""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from pipeline_demo import __init__conf__
from pipeline_demo.domain.behaviors import describe_environment

from ..constants import CLICK_CONTEXT_SETTINGS

logger = logging.getLogger(__name__)


@click.command("env", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_env() -> None:
    """Print the Python version this build runs on."""
    with lib_log_rich.runtime.bind(job_id="cli-env", extra={"command": "env"}):
        logger.info("Describing runtime environment")
        click.echo(describe_environment())


@click.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print name, version, homepage and author of the installed package."""
    with lib_log_rich.runtime.bind(job_id="cli-info", extra={"command": "info"}):
        logger.info("Printing package metadata")
        __init__conf__.print_info()


__all__ = ["cli_env", "cli_info"]
