"""Result data structures produced by the checker."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional

from .errors import InvalidArgument

if TYPE_CHECKING:
    from .models import UserSolution

# Recorded as the observed output when a case could not be evaluated.
ERROR_MARKER = "<error>"
TIMEOUT_MARKER = "<timeout>"


@dataclass
class ExecutionResult:
    """Outcome of running a single test case."""

    actual_output: str = ""
    passed: bool = False
    error: Optional[str] = None

    @property
    def status(self) -> str:
        if self.error is not None:
            return "error"
        return "passed" if self.passed else "failed"


@dataclass
class Submission:
    """Aggregated outcome of checking one solution against one task."""

    solution: "UserSolution"
    results: List[ExecutionResult] = field(default_factory=list)
    total_passed: int = 0

    @classmethod
    def allocate(cls, solution: "UserSolution", size: int) -> "Submission":
        if size < 0:
            raise InvalidArgument(f"Submission size cannot be negative (got {size})")
        return cls(solution=solution, results=[ExecutionResult() for _ in range(size)])

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def failed(self) -> int:
        return self.total - self.total_passed

    def recount(self) -> int:
        self.total_passed = sum(1 for result in self.results if result.passed)
        return self.total_passed
