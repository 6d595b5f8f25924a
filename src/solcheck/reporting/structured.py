"""Structured (JSON/YAML) rendering of submissions."""
from __future__ import annotations

import datetime as dt
import json
from typing import Any, Dict, Optional

import click
import yaml
from jsonschema import validate

from solcheck.core.errors import InvalidArgument
from solcheck.core.models import DescribedTestCase, Task, UserSolution
from solcheck.core.results import ExecutionResult, Submission

from .base import Reporter
from .schema import REPORT_SCHEMA_V1, SCHEMA_VERSION

STRUCTURED_FORMATS = ("json", "yaml")


def submission_to_dict(task: Task, submission: Submission) -> Dict[str, Any]:
    """Build a schema-validated mapping describing ``submission``."""

    tests = task.suite.tests()
    errors = sum(1 for result in submission.results if result.error is not None)
    payload = {
        "schema_version": SCHEMA_VERSION,
        "generated_at": dt.datetime.now(dt.timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
        "task": task.description,
        "solution": submission.solution.payload,
        "summary": {
            "total": submission.total,
            "passed": submission.total_passed,
            "failed": submission.failed - errors,
            "errors": errors,
        },
        "results": [
            _result_to_dict(index, result, tests[index] if index < len(tests) else None)
            for index, result in enumerate(submission.results)
        ],
    }
    validate(instance=payload, schema=REPORT_SCHEMA_V1)
    return payload


def render_report(payload: Dict[str, Any], fmt: str) -> str:
    if fmt == "json":
        return json.dumps(payload, indent=2)
    if fmt == "yaml":
        return yaml.safe_dump(payload, sort_keys=False)
    raise InvalidArgument(f"Unsupported report format '{fmt}'")


class StructuredReporter(Reporter):
    """Echoes a JSON or YAML document once checking completes."""

    def __init__(self, fmt: str = "json") -> None:
        if fmt not in STRUCTURED_FORMATS:
            raise InvalidArgument(f"Unsupported report format '{fmt}'")
        self._fmt = fmt
        self._task: Optional[Task] = None

    def on_start(self, task: Task, solution: UserSolution) -> None:
        self._task = task

    def on_result(self, result: ExecutionResult, position: int, total: int) -> None:
        pass

    def on_complete(self, submission: Submission) -> None:
        if self._task is None:
            return
        click.echo(render_report(submission_to_dict(self._task, submission), self._fmt))


def _result_to_dict(index: int, result: ExecutionResult, case) -> Dict[str, Any]:
    # 0-based, aligned with Submission.results.
    record: Dict[str, Any] = {
        "index": index,
        "status": result.status,
        "passed": result.passed,
        "actual_output": result.actual_output,
    }
    if case is not None:
        record["input"] = case.input
        record["expected"] = case.expected
        record["strategy"] = case.strategy.describe()
        if isinstance(case, DescribedTestCase):
            record["description"] = case.description
    if result.error is not None:
        record["error"] = result.error
    return record
