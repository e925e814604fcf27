"""Pure domain functions for the build-validation demo.

Everything the CI pipeline checks lives here: the greeting, the build
timestamp, the readiness line and a few small utilities that unit tests
can exercise without touching the CLI.

Contents:
    * :func:`build_greeting` - the canonical greeting.
    * :func:`format_timestamp` / :func:`get_current_timestamp` - build time.
    * :func:`add` / :func:`is_even` - integer utilities.
    * :func:`describe_environment` - runtime version line.
    * :func:`build_report` - the three lines printed by the entry point.
"""

from __future__ import annotations

import platform
from collections.abc import Callable
from datetime import datetime
from typing import Final

from .errors import OperandError

CANONICAL_GREETING: Final[str] = "Hello World from Jenkins Multibranch Pipeline!"
READY_MESSAGE: Final[str] = "Application ready for Jenkins multibranch pipeline testing!"
BUILD_COMPLETED_PREFIX: Final[str] = "Build completed at: "
ENVIRONMENT_PREFIX: Final[str] = "Running in: "
TIMESTAMP_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"


def build_greeting() -> str:
    r"""Return the canonical greeting string.

    Provide a deterministic success path that the pipeline, smoke tests,
    and packaging checks can rely on.

    Returns:
        The canonical greeting string.

    Example:
        >>> build_greeting()
        'Hello World from Jenkins Multibranch Pipeline!'
    """
    return CANONICAL_GREETING


def format_timestamp(moment: datetime) -> str:
    """Render ``moment`` as ``YYYY-MM-DD HH:MM:SS`` on a 24-hour clock.

    Example:
        >>> format_timestamp(datetime(2024, 1, 2, 15, 4, 5))
        '2024-01-02 15:04:05'
    """
    return moment.strftime(TIMESTAMP_FORMAT)


def get_current_timestamp(clock: Callable[[], datetime] = datetime.now) -> str:
    """Read the local wall clock and format it for the build report.

    Args:
        clock: Zero-argument callable returning the current local time.
            Defaults to :meth:`datetime.datetime.now`.

    Returns:
        Timestamp string matching ``\\d{4}-\\d{2}-\\d{2} \\d{2}:\\d{2}:\\d{2}``.
    """
    return format_timestamp(clock())


def _require_int(value: object, label: str) -> int:
    # bool is an int subclass but never a valid operand
    if isinstance(value, bool) or not isinstance(value, int):
        raise OperandError(f"{label} must be an integer, got {type(value).__name__}")
    return value


def add(a: int, b: int) -> int:
    """Return the sum of two integers.

    Args:
        a: First operand.
        b: Second operand.

    Returns:
        ``a + b``. Python integers do not overflow.

    Raises:
        OperandError: If either operand is not an ``int`` (``bool`` included).

    Example:
        >>> add(2, 3)
        5
        >>> add(-1, 1)
        0
    """
    return _require_int(a, "a") + _require_int(b, "b")


def is_even(n: int) -> bool:
    """Return ``True`` when ``n`` is divisible by two, negatives included.

    Raises:
        OperandError: If ``n`` is not an ``int``.

    Example:
        >>> is_even(4), is_even(7), is_even(-2)
        (True, False, True)
    """
    return _require_int(n, "n") % 2 == 0


def describe_environment(version: str | None = None) -> str:
    """Return ``"Running in: <python version>"``.

    Args:
        version: Explicit version string. When None, uses
            :func:`platform.python_version`.

    Example:
        >>> describe_environment("3.12.1")
        'Running in: 3.12.1'
    """
    resolved = version if version is not None else platform.python_version()
    return f"{ENVIRONMENT_PREFIX}{resolved}"


def build_report(timestamp: str) -> tuple[str, str, str]:
    """Return the three lines the entry point writes to stdout, in order.

    Example:
        >>> build_report("2024-01-02 03:04:05")[1]
        'Build completed at: 2024-01-02 03:04:05'
    """
    return (
        build_greeting(),
        f"{BUILD_COMPLETED_PREFIX}{timestamp}",
        READY_MESSAGE,
    )


__all__ = [
    "BUILD_COMPLETED_PREFIX",
    "CANONICAL_GREETING",
    "ENVIRONMENT_PREFIX",
    "READY_MESSAGE",
    "TIMESTAMP_FORMAT",
    "add",
    "build_greeting",
    "build_report",
    "describe_environment",
    "format_timestamp",
    "get_current_timestamp",
    "is_even",
]
