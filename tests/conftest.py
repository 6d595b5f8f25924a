import pytest

from solcheck.core import ExactStrategy, GatedStrategy, Task, TestCase, TestSuite


@pytest.fixture
def sample_cases() -> list:
    """The two-case suite used by the sample program."""

    return [
        TestCase("input1", "expected1", ExactStrategy()),
        TestCase("input2", "input2", GatedStrategy(3)),
    ]


@pytest.fixture
def sample_task(sample_cases) -> Task:
    return Task(description="sample", suite=TestSuite.of(sample_cases))
