"""Terminal reporter rendering per-test lines and a summary."""
from __future__ import annotations

from typing import Optional

import click

from solcheck.core.models import Task, UserSolution
from solcheck.core.results import ExecutionResult, Submission

from .base import Reporter


STATUS_COLORS = {
    "passed": "green",
    "failed": "red",
    "error": "yellow",
}


class TerminalReporter(Reporter):
    """Human-readable reporter that streams to stdout."""

    def __init__(self, *, use_color: bool = True) -> None:
        self._use_color = use_color
        self._task: Optional[Task] = None
        self._failures: list[tuple[int, ExecutionResult]] = []

    def on_start(self, task: Task, solution: UserSolution) -> None:
        self._task = task
        self._failures.clear()
        click.echo(
            self._styled(
                f"Checking solution {solution.payload!r} against task {task.description!r}: "
                f"{task.suite.count()} test(s)",
                force_color="cyan",
            )
        )

    def on_result(self, result: ExecutionResult, position: int, total: int) -> None:
        label = self._label(position)
        status_text = self._styled(result.status.upper())
        click.echo(f"[{position}/{total}] {label} -> {status_text}")
        if not result.passed:
            self._failures.append((position, result))

    def on_complete(self, submission: Submission) -> None:
        errors = sum(1 for result in submission.results if result.error is not None)
        click.echo(
            self._styled(
                f"Summary: total={submission.total} passed={submission.total_passed} "
                f"failed={submission.failed - errors} errors={errors}",
                force_color="cyan",
            )
        )
        if self._failures:
            click.echo(self._styled("Failure details:", force_color="red"))
            for position, result in self._failures:
                click.echo(f"  [{position}] {self._label(position)} -> {result.status}")
                self._print_failure_details(position, result, indent="    ")

    def _label(self, position: int) -> str:
        case = self._case_at(position)
        if case is None:
            return "<unlisted>"
        return case.display_input()

    def _case_at(self, position: int):
        if self._task is None:
            return None
        tests = self._task.suite.tests()
        if 1 <= position <= len(tests):
            return tests[position - 1]
        return None

    def _styled(self, text: str, *, force_color: str | None = None) -> str:
        if not self._use_color:
            return text
        color = force_color or STATUS_COLORS.get(text.lower(), None)
        if color:
            return click.style(text, fg=color)
        return text

    def _print_failure_details(self, position: int, result: ExecutionResult, *, indent: str) -> None:
        if result.error:
            click.echo(f"{indent}error: {result.error}")
            return
        case = self._case_at(position)
        if case is None:
            click.echo(f"{indent}no test case backs this slot")
            return
        click.echo(
            f"{indent}strategy={case.strategy.describe()} "
            f"actual={result.actual_output!r} expected={case.expected!r}"
        )
