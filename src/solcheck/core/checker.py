"""Checker running a task's test suite and aggregating a submission."""
from __future__ import annotations

import logging
import threading
import time
from concurrent.futures import Future, ThreadPoolExecutor, TimeoutError as FutureTimeout
from typing import TYPE_CHECKING, Callable, Dict, List, Optional, Sequence

from .errors import ComparisonFailure, InvalidArgument
from .models import AnyTestCase, Task, UserSolution
from .results import ERROR_MARKER, TIMEOUT_MARKER, ExecutionResult, Submission

if TYPE_CHECKING:
    from solcheck.config import CheckSettings

logger = logging.getLogger(__name__)

# Called as on_result(result, position, total) with a 1-based position.
ResultCallback = Callable[[ExecutionResult, int, int], None]


class Checker:
    """Runs every test case of a task against a solution.

    Results are written at the index of the case that produced them, so
    ``submission.results[i]`` always describes ``task.suite.tests()[i]``.
    With ``workers > 1`` cases run in a thread pool; ``timeout_s`` bounds
    each pooled case from the moment it starts running.
    """

    def __init__(self, *, workers: int = 1, timeout_s: Optional[float] = None) -> None:
        if workers < 1:
            raise InvalidArgument(f"workers must be at least 1 (got {workers})")
        if timeout_s is not None and timeout_s <= 0:
            raise InvalidArgument(f"timeout must be positive (got {timeout_s})")
        self._workers = workers
        self._timeout_s = timeout_s

    @classmethod
    def from_settings(cls, settings: "CheckSettings") -> "Checker":
        return cls(workers=settings.workers, timeout_s=settings.timeout_s)

    def check(
        self,
        solution: UserSolution,
        task: Task,
        *,
        on_result: Optional[ResultCallback] = None,
    ) -> Submission:
        tests = task.suite.tests()
        size = task.suite.count()
        if len(tests) > size:
            raise InvalidArgument(
                f"Suite reports {size} test(s) but holds {len(tests)}; results cannot be aligned"
            )
        submission = Submission.allocate(solution, size)
        logger.info("Checking task %r: %d test(s), %d slot(s)", task.description, len(tests), size)
        if self._workers > 1 or self._timeout_s is not None:
            self._run_pooled(tests, submission)
            notified = 0
        else:
            for index, case in enumerate(tests):
                submission.results[index] = _run_case(case, index)
                if on_result:
                    on_result(submission.results[index], index + 1, size)
            notified = len(tests)
        # Pooled results and unbacked bonus slots are reported in index order.
        if on_result:
            for index in range(notified, size):
                on_result(submission.results[index], index + 1, size)
        submission.recount()
        logger.info(
            "Finished task %r: %d/%d passed", task.description, submission.total_passed, size
        )
        return submission

    def _run_pooled(self, tests: Sequence[AnyTestCase], submission: Submission) -> None:
        tracker = _StartTracker(len(tests))
        executors: List[ThreadPoolExecutor] = []

        def submit_all(indexes: Sequence[int]) -> Dict[int, Future]:
            executor = ThreadPoolExecutor(max_workers=self._workers)
            executors.append(executor)
            return {index: executor.submit(tracker.run, tests[index], index) for index in indexes}

        futures = submit_all(range(len(tests)))
        try:
            for index in range(len(tests)):
                # Cases start in queue order, so this one is next in line once
                # every earlier case has finished or been abandoned.
                tracker.wait_started(index)
                try:
                    submission.results[index] = futures[index].result(
                        timeout=tracker.remaining(index, self._timeout_s)
                    )
                except FutureTimeout:
                    logger.warning("Test case %d timed out after %ss", index, self._timeout_s)
                    submission.results[index] = ExecutionResult(
                        actual_output=TIMEOUT_MARKER,
                        passed=False,
                        error=f"timed out after {self._timeout_s}s",
                    )
                    # The hung worker keeps its slot; move queued cases to a fresh pool.
                    queued = [later for later in range(index + 1, len(tests)) if futures[later].cancel()]
                    if queued:
                        futures.update(submit_all(queued))
        finally:
            # Hung cases are abandoned rather than joined.
            for executor in executors:
                executor.shutdown(wait=False)


class _StartTracker:
    """Records when each pooled case actually begins running."""

    def __init__(self, size: int) -> None:
        self._started = [threading.Event() for _ in range(size)]
        self._started_at = [0.0] * size

    def run(self, case: AnyTestCase, index: int) -> ExecutionResult:
        self._started_at[index] = time.monotonic()
        self._started[index].set()
        return _run_case(case, index)

    def wait_started(self, index: int) -> None:
        self._started[index].wait()

    def remaining(self, index: int, timeout_s: Optional[float]) -> Optional[float]:
        if timeout_s is None:
            return None
        return max(0.0, self._started_at[index] + timeout_s - time.monotonic())


def _run_case(case: AnyTestCase, index: int) -> ExecutionResult:
    try:
        return case.run()
    except Exception as exc:
        failure = ComparisonFailure(index, exc)
        logger.warning("%s", failure)
        return ExecutionResult(actual_output=ERROR_MARKER, passed=False, error=str(failure))
