"""Core models and helpers exposed at the package level."""
from .checker import Checker
from .errors import ComparisonFailure, InvalidArgument, SolcheckError
from .lookup import find_by_expected, sort_by_input
from .models import (
    AugmentedTestSuite,
    DescribedTestCase,
    Task,
    TestCase,
    TestSuite,
    UserSolution,
)
from .results import ERROR_MARKER, TIMEOUT_MARKER, ExecutionResult, Submission
from .session import CheckSession
from .strategies import ExactStrategy, GatedStrategy, parse_strategy

__all__ = [
    "AugmentedTestSuite",
    "CheckSession",
    "Checker",
    "ComparisonFailure",
    "DescribedTestCase",
    "ERROR_MARKER",
    "ExactStrategy",
    "ExecutionResult",
    "GatedStrategy",
    "InvalidArgument",
    "SolcheckError",
    "Submission",
    "TIMEOUT_MARKER",
    "Task",
    "TestCase",
    "TestSuite",
    "UserSolution",
    "find_by_expected",
    "parse_strategy",
    "sort_by_input",
]
