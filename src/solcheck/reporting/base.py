"""Reporter interface and the manager driving a reported check."""
from __future__ import annotations

from typing import List, Sequence

from solcheck.core.checker import Checker
from solcheck.core.models import Task, UserSolution
from solcheck.core.results import ExecutionResult, Submission


class Reporter:
    """Receives the lifecycle of one checked submission.

    ``position`` is 1-based and ``total`` is the suite's reported count, so
    bonus slots of an augmented suite are delivered too. Structured reports
    use the 0-based ``index`` of ``Submission.results`` instead.
    """

    def on_start(self, task: Task, solution: UserSolution) -> None:  # pragma: no cover - interface
        raise NotImplementedError

    def on_result(self, result: ExecutionResult, position: int, total: int) -> None:  # pragma: no cover
        raise NotImplementedError

    def on_complete(self, submission: Submission) -> None:  # pragma: no cover
        raise NotImplementedError


class ReportManager:
    """Fans submission events out to several reporters."""

    def __init__(self, reporters: Sequence[Reporter]) -> None:
        self._reporters = list(reporters)

    def check(self, checker: Checker, solution: UserSolution, task: Task) -> Submission:
        """Run ``checker`` over ``task`` with every reporter attached."""

        self.start(task, solution)
        submission = checker.check(solution, task, on_result=self.handle_result)
        self.complete(submission)
        return submission

    def start(self, task: Task, solution: UserSolution) -> None:
        for reporter in self._reporters:
            reporter.on_start(task, solution)

    def handle_result(self, result: ExecutionResult, position: int, total: int) -> None:
        for reporter in self._reporters:
            reporter.on_result(result, position, total)

    def complete(self, submission: Submission) -> None:
        for reporter in self._reporters:
            reporter.on_complete(submission)

    def reporters(self) -> List[Reporter]:
        return list(self._reporters)
