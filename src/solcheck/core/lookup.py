"""Search and ordering helpers over collections of test cases."""
from __future__ import annotations

from typing import Iterable, List, Optional, TypeVar

from .models import AnyTestCase

CaseT = TypeVar("CaseT", bound=AnyTestCase)


def find_by_expected(cases: Iterable[CaseT], expected: str) -> Optional[CaseT]:
    """Return the first case whose expected value matches, or ``None``."""

    for case in cases:
        if case.expected == expected:
            return case
    return None


def sort_by_input(cases: Iterable[CaseT]) -> List[CaseT]:
    """Stable lexicographic ordering on ``input``."""

    return sorted(cases, key=lambda case: case.input)
