"""Shared pytest fixtures.

CLI fixtures build services around the real ``init_logging`` (wrapped in a
``RecordingLogInit``) because every command logs inside
``lib_log_rich.runtime.bind``. Only configuration and the clock are
replaced by in-memory versions.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from datetime import datetime
from typing import Any

import lib_log_rich.runtime
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

from pipeline_demo.adapters.cli import TracebackFlags
from pipeline_demo.adapters.config import load_config
from pipeline_demo.adapters.logging import init_logging
from pipeline_demo.adapters.memory import QUIET_LOGGING_SECTION, FrozenClock, RecordingLogInit
from pipeline_demo.composition import AppServices, build_production

ANSI_ESCAPE = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")

ServicesFactory = Callable[[], AppServices]


@pytest.fixture(autouse=True)
def shutdown_logging_runtime() -> Iterator[None]:
    """Stop a lib_log_rich runtime a test left running."""
    yield
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()


@pytest.fixture
def traceback_flags() -> Iterator[None]:
    """Start with tracebacks off and put the previous flags back afterwards."""
    saved = TracebackFlags.current()
    TracebackFlags().install()
    try:
        yield
    finally:
        saved.install()


@pytest.fixture
def cli_runner() -> CliRunner:
    """CliRunner keeping stdout (command output) apart from stderr (logs, errors)."""
    return CliRunner()


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    return lambda text: ANSI_ESCAPE.sub("", text)


@pytest.fixture
def make_services() -> Callable[..., ServicesFactory]:
    """Return a builder of services factories over a fixed Config.

    ``sections`` become the configuration, with quiet logging added unless
    they set ``lib_log_rich`` themselves. The clock defaults to
    ``DEFAULT_FROZEN_MOMENT``.

    Example:
        def test_timestamp(cli_runner, make_services) -> None:
            factory = make_services(moment=datetime(2030, 1, 1))
            result = cli_runner.invoke(cli, ["timestamp"], obj=factory)
    """

    def _build(
        sections: dict[str, Any] | None = None,
        *,
        moment: datetime | None = None,
        init: RecordingLogInit | None = None,
    ) -> ServicesFactory:
        config = Config({"lib_log_rich": dict(QUIET_LOGGING_SECTION), **(sections or {})}, {})

        def _load(*, start_dir: str | None = None) -> Config:
            return config

        services = AppServices(
            load_config=_load,
            init_logging=init if init is not None else RecordingLogInit(delegate=init_logging),
            read_clock=FrozenClock() if moment is None else FrozenClock(moment),
        )
        return lambda: services

    return _build


@pytest.fixture
def frozen_factory(make_services: Callable[..., ServicesFactory]) -> ServicesFactory:
    """Services reporting ``DEFAULT_FROZEN_MOMENT`` with quiet logging."""
    return make_services()


@pytest.fixture
def production_factory() -> Iterator[ServicesFactory]:
    """``build_production`` with the configuration cache emptied around the test."""
    load_config.cache_clear()
    yield build_production
    load_config.cache_clear()
