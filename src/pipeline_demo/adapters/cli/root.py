"""The ``pipeline-demo`` command group.

Every run loads the layered configuration and starts logging from it
before anything is printed. Without a subcommand the group prints the
build report, which is how the CI pipeline calls the program.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import lib_log_rich.runtime
import rich_click as click
from pydantic import ValidationError

from pipeline_demo import __init__conf__

from .commands import ALL_COMMANDS
from .commands.report import echo_build_report
from .constants import CLICK_CONTEXT_SETTINGS
from .context import RunState, TracebackFlags
from .exit_codes import ExitCode

if TYPE_CHECKING:
    from lib_layered_config import Config

    from pipeline_demo.composition import AppServices

logger = logging.getLogger(__name__)


class LoggingConfigError(click.ClickException):
    """The ``[lib_log_rich]`` section cannot configure the logging runtime."""

    exit_code = ExitCode.CONFIG_ERROR

    @classmethod
    def from_validation(cls, exc: ValidationError) -> LoggingConfigError:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
        )
        return cls(f"invalid [lib_log_rich] configuration: {problems}")


def _start_logging(services: AppServices, config: Config) -> None:
    try:
        services.init_logging(config)
    except ValidationError as exc:
        raise LoggingConfigError.from_validation(exc) from exc


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool) -> None:
    """Print the build report, or run the given command.

    Example:
        >>> from click.testing import CliRunner
        >>> from pipeline_demo.composition import build_production
        >>> CliRunner().invoke(cli, [], obj=build_production).stdout.splitlines()[0]  # doctest: +SKIP
        'Hello World from Jenkins Multibranch Pipeline!'
    """
    if not callable(ctx.obj):
        raise RuntimeError("Services factory not provided. This is a bug.")
    services: AppServices = ctx.obj()
    config = services.load_config()
    _start_logging(services, config)
    TracebackFlags.requested(traceback).install()
    ctx.obj = RunState(services=services, config=config, traceback=traceback)

    if ctx.invoked_subcommand is None:
        with lib_log_rich.runtime.bind(job_id="cli-build", extra={"command": "<default>"}):
            logger.info("No subcommand given, printing build report")
            echo_build_report(services)


for _command in ALL_COMMANDS:
    cli.add_command(_command)


__all__ = ["LoggingConfigError", "cli"]
