"""In-memory adapters and the composition root."""

from __future__ import annotations

from dataclasses import FrozenInstanceError, fields
from datetime import datetime

import pytest
from lib_layered_config import Config

from pipeline_demo.adapters.config import load_config
from pipeline_demo.adapters.logging import init_logging
from pipeline_demo.adapters.memory import (
    DEFAULT_FROZEN_MOMENT,
    FrozenClock,
    RecordingLogInit,
    load_config_in_memory,
)
from pipeline_demo.composition import AppServices, build_production, build_testing


@pytest.mark.os_agnostic
def test_in_memory_config_holds_only_quiet_logging() -> None:
    assert load_config_in_memory(start_dir="/nowhere").as_dict() == {"lib_log_rich": {"console_level": "WARNING"}}


@pytest.mark.os_agnostic
def test_in_memory_config_is_a_fresh_copy_each_time() -> None:
    assert load_config_in_memory() is not load_config_in_memory()


@pytest.mark.os_agnostic
def test_recording_log_init_without_delegate_only_records() -> None:
    recorder = RecordingLogInit()
    config = Config({}, {})

    recorder(config)

    assert recorder.calls == [config]


@pytest.mark.os_agnostic
def test_recording_log_init_forwards_to_its_delegate() -> None:
    forwarded: list[Config] = []
    recorder = RecordingLogInit(delegate=forwarded.append)
    config = Config({}, {})

    recorder(config)

    assert forwarded == [config]


@pytest.mark.os_agnostic
def test_frozen_clock_never_moves() -> None:
    clock = FrozenClock(datetime(2030, 5, 6, 7, 8, 9))

    assert clock() == clock() == datetime(2030, 5, 6, 7, 8, 9)


@pytest.mark.os_agnostic
def test_build_testing_uses_in_memory_adapters() -> None:
    services = build_testing()

    assert services.load_config is load_config_in_memory
    assert isinstance(services.init_logging, RecordingLogInit)
    assert services.read_clock() == DEFAULT_FROZEN_MOMENT


@pytest.mark.os_agnostic
def test_build_testing_gives_each_call_its_own_recorder() -> None:
    assert build_testing().init_logging is not build_testing().init_logging


@pytest.mark.os_agnostic
def test_build_testing_accepts_a_custom_moment() -> None:
    moment = datetime(2021, 2, 3, 4, 5, 6)

    assert build_testing(frozen_at=moment).read_clock() == moment


@pytest.mark.os_agnostic
def test_build_production_uses_real_adapters() -> None:
    services = build_production()
    before = datetime.now()

    assert services.load_config is load_config
    assert services.init_logging is init_logging
    assert services.read_clock() >= before


@pytest.mark.os_agnostic
@pytest.mark.parametrize("factory", [build_production, build_testing])
def test_every_service_is_callable(factory: object) -> None:
    services: AppServices = factory()  # type: ignore[operator]

    for field in fields(services):
        assert callable(getattr(services, field.name)), field.name


@pytest.mark.os_agnostic
def test_app_services_is_frozen() -> None:
    with pytest.raises(FrozenInstanceError):
        build_testing().read_clock = datetime.now  # type: ignore[misc]


@pytest.mark.os_agnostic
def test_composition_exports_only_the_wiring() -> None:
    from pipeline_demo import composition

    assert sorted(composition.__all__) == ["AppServices", "build_production", "build_testing"]
    assert not hasattr(composition, "get_config")
