"""Checking session owning suite bookkeeping."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .models import AnySuite, AnyTestCase, AugmentedTestSuite, TestSuite


@dataclass
class CheckSession:
    """Orchestrates suite creation and counts the suites it builds."""

    suites_created: int = 0

    def new_suite(self, cases: Iterable[AnyTestCase], *, augmented: bool = False) -> AnySuite:
        suite: AnySuite = TestSuite.of(cases)
        if augmented:
            suite = AugmentedTestSuite(suite)
        self.suites_created += 1
        return suite
