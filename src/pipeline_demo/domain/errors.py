"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class OperandError(ValueError):
    """An arithmetic utility received a value that is not an integer.

    Inherits from ValueError so generic ``except ValueError`` handlers
    still catch it. CLI operands are converted by Click before they get
    here, so only Python callers see it.

    Example:
        >>> from pipeline_demo.domain.errors import OperandError
        >>> err = OperandError("a must be an integer, got str")
        >>> str(err)
        'a must be an integer, got str'
        >>> isinstance(err, ValueError)
        True
    """


__all__ = ["OperandError"]
