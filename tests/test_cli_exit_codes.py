"""Exit code values a CI job compares against."""

from __future__ import annotations

import pytest

from pipeline_demo.adapters.cli.exit_codes import ExitCode


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("member", "value"),
    [
        (ExitCode.SUCCESS, 0),
        (ExitCode.GENERAL_ERROR, 1),
        (ExitCode.USAGE_ERROR, 2),
        (ExitCode.CONFIG_ERROR, 78),
        (ExitCode.SIGNAL_INT, 130),
        (ExitCode.BROKEN_PIPE, 141),
        (ExitCode.SIGNAL_TERM, 143),
    ],
)
def test_exit_code_values(member: ExitCode, value: int) -> None:
    assert member == value


@pytest.mark.os_agnostic
def test_only_success_is_zero() -> None:
    assert [member for member in ExitCode if member == 0] == [ExitCode.SUCCESS]
