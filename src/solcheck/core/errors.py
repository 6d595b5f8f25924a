"""Error taxonomy raised by the checking core."""
from __future__ import annotations


class SolcheckError(Exception):
    """Base class for solcheck errors."""


class InvalidArgument(SolcheckError, ValueError):
    """Raised when an object is constructed or called with malformed arguments."""


class ComparisonFailure(SolcheckError, RuntimeError):
    """Raised when a strategy fails while evaluating a single test case."""

    def __init__(self, index: int, cause: BaseException) -> None:
        super().__init__(f"Test case {index} failed during evaluation: {cause}")
        self.index = index
        self.cause = cause
