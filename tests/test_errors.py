"""Domain error tests."""

from __future__ import annotations

import pytest

from pipeline_demo import OperandError, add


@pytest.mark.os_agnostic
def test_operand_error_is_a_value_error() -> None:
    assert issubclass(OperandError, ValueError)


@pytest.mark.os_agnostic
def test_operand_error_is_caught_by_value_error_handlers() -> None:
    with pytest.raises(ValueError, match="must be an integer"):
        add("2", 3)  # type: ignore[arg-type]
