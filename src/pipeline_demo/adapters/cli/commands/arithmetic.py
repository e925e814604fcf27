"""Integer utility commands.

Click converts operands with ``type=int``, so anything that is not an
integer fails as a usage error before reaching the domain. Negative
operands are taken as written: ``pipeline-demo add -1 1`` prints ``0``.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from pipeline_demo.domain.behaviors import add, is_even

from ..constants import INTEGER_OPERAND_SETTINGS

logger = logging.getLogger(__name__)


@click.command("add", context_settings=INTEGER_OPERAND_SETTINGS)
@click.argument("a", type=int)
@click.argument("b", type=int)
def cli_add(a: int, b: int) -> None:
    """Print A + B."""
    with lib_log_rich.runtime.bind(job_id="cli-add", extra={"command": "add"}):
        logger.info("Adding operands", extra={"a": a, "b": b})
        click.echo(str(add(a, b)))


@click.command("is-even", context_settings=INTEGER_OPERAND_SETTINGS)
@click.argument("n", type=int)
def cli_is_even(n: int) -> None:
    """Print 'true' when N is even, otherwise 'false'."""
    with lib_log_rich.runtime.bind(job_id="cli-is-even", extra={"command": "is-even"}):
        logger.info("Checking parity", extra={"n": n})
        click.echo("true" if is_even(n) else "false")


__all__ = ["cli_add", "cli_is_even"]
