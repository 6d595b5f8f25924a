"""Core dataclasses describing tasks, suites and test cases."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Tuple, Union

from .errors import InvalidArgument
from .results import ExecutionResult
from .strategies import ComparisonStrategy, is_strategy


@dataclass(frozen=True)
class TestCase:
    """An input/expected pair judged by a comparison strategy."""

    __test__ = False  # keep pytest from collecting this class

    input: str
    expected: str
    strategy: ComparisonStrategy

    def __post_init__(self) -> None:
        if not isinstance(self.input, str):
            raise InvalidArgument("TestCase input must be a string")
        if not isinstance(self.expected, str):
            raise InvalidArgument("TestCase expected value must be a string")
        if not is_strategy(self.strategy):
            raise InvalidArgument(
                f"TestCase requires a comparison strategy, got {self.strategy!r}"
            )

    def run(self) -> ExecutionResult:
        # The raw input is recorded as the observed output; nothing is executed.
        return ExecutionResult(
            actual_output=self.input,
            passed=self.strategy.evaluate(self.input, self.expected),
        )

    def display_input(self) -> str:
        return self.input


@dataclass(frozen=True)
class DescribedTestCase:
    """Test case carrying a human-readable description for reporting."""

    __test__ = False

    case: TestCase
    description: str

    def __post_init__(self) -> None:
        if not isinstance(self.case, TestCase):
            raise InvalidArgument("DescribedTestCase must wrap a TestCase")
        if not isinstance(self.description, str):
            raise InvalidArgument("DescribedTestCase description must be a string")

    @classmethod
    def create(
        cls, input: str, expected: str, description: str, strategy: ComparisonStrategy
    ) -> "DescribedTestCase":
        return cls(case=TestCase(input, expected, strategy), description=description)

    @property
    def input(self) -> str:
        return self.case.input

    @property
    def expected(self) -> str:
        return self.case.expected

    @property
    def strategy(self) -> ComparisonStrategy:
        return self.case.strategy

    def run(self) -> ExecutionResult:
        return self.case.run()

    def display_input(self) -> str:
        return f"Description: {self.description}, Input: {self.case.input}"


AnyTestCase = Union[TestCase, DescribedTestCase]


@dataclass(frozen=True)
class TestSuite:
    """Ordered collection of test cases; order defines result indexing."""

    __test__ = False

    cases: Tuple[AnyTestCase, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        cases = tuple(self.cases)
        for case in cases:
            if not isinstance(case, (TestCase, DescribedTestCase)):
                raise InvalidArgument(f"TestSuite entries must be test cases, got {case!r}")
        object.__setattr__(self, "cases", cases)

    @classmethod
    def of(cls, cases: Iterable[AnyTestCase]) -> "TestSuite":
        return cls(cases=tuple(cases))

    def tests(self) -> Tuple[AnyTestCase, ...]:
        return self.cases

    def count(self) -> int:
        return len(self.cases)


@dataclass(frozen=True)
class AugmentedTestSuite:
    """Suite that always reports one bonus test beyond those it holds.

    ``count()`` intentionally disagrees with ``len(tests())``; the checker
    sizes submissions by ``count()`` so the bonus slot stays unpassed.
    """

    __test__ = False

    base: TestSuite

    def __post_init__(self) -> None:
        if not isinstance(self.base, TestSuite):
            raise InvalidArgument("AugmentedTestSuite must wrap a TestSuite")

    def tests(self) -> Tuple[AnyTestCase, ...]:
        return self.base.tests()

    def count(self) -> int:
        return self.base.count() + 1


AnySuite = Union[TestSuite, AugmentedTestSuite]


@dataclass(frozen=True)
class Task:
    """A described test suite presented to a solver."""

    description: str
    suite: AnySuite

    def __post_init__(self) -> None:
        if not isinstance(self.description, str):
            raise InvalidArgument("Task description must be a string")
        if not isinstance(self.suite, (TestSuite, AugmentedTestSuite)):
            raise InvalidArgument(f"Task requires a test suite, got {self.suite!r}")

    def copy_reference(self) -> "Task":
        """Shallow clone: the same shared handle."""

        return self

    def copy_value(self) -> "Task":
        """Deep clone: a new task with a new suite over the same cases."""

        suite = self.suite
        if isinstance(suite, AugmentedTestSuite):
            copied: AnySuite = AugmentedTestSuite(TestSuite.of(suite.base.tests()))
        else:
            copied = TestSuite.of(suite.tests())
        return Task(description=self.description, suite=copied)


@dataclass(frozen=True)
class UserSolution:
    """Opaque candidate solution; never interpreted."""

    payload: str
