import pytest

from solcheck.core import (
    AugmentedTestSuite,
    CheckSession,
    DescribedTestCase,
    ExactStrategy,
    ExecutionResult,
    GatedStrategy,
    InvalidArgument,
    Task,
    TestCase,
    TestSuite,
)


def test_test_case_run_records_input_as_actual_output() -> None:
    result = TestCase("input1", "expected1", ExactStrategy()).run()
    assert result == ExecutionResult(actual_output="input1", passed=False)
    assert TestCase("same", "same", ExactStrategy()).run().passed


def test_test_case_requires_strategy() -> None:
    with pytest.raises(InvalidArgument):
        TestCase("a", "b", None)  # type: ignore[arg-type]
    with pytest.raises(InvalidArgument):
        TestCase("a", "b", lambda a, b: True)  # type: ignore[arg-type]


def test_test_case_requires_string_fields() -> None:
    with pytest.raises(InvalidArgument):
        TestCase(None, "b", ExactStrategy())  # type: ignore[arg-type]
    with pytest.raises(InvalidArgument):
        TestCase("a", 2, ExactStrategy())  # type: ignore[arg-type]


def test_default_execution_result_is_unpassed() -> None:
    result = ExecutionResult()
    assert result.passed is False
    assert result.status == "failed"


def test_described_case_display_does_not_affect_comparison() -> None:
    case = DescribedTestCase.create("input3", "input3", "Test A", ExactStrategy())
    assert case.display_input() == "Description: Test A, Input: input3"
    assert case.input == "input3"
    result = case.run()
    assert result.passed
    assert result.actual_output == "input3"


def test_plain_case_display_is_raw_input() -> None:
    assert TestCase("x", "y", ExactStrategy()).display_input() == "x"


def test_suite_preserves_order_and_counts(sample_cases) -> None:
    suite = TestSuite.of(sample_cases)
    assert list(suite.tests()) == sample_cases
    assert suite.count() == 2


def test_suite_rejects_non_cases() -> None:
    with pytest.raises(InvalidArgument):
        TestSuite.of(["not a case"])  # type: ignore[list-item]


def test_augmented_suite_reports_one_bonus_test(sample_cases) -> None:
    suite = AugmentedTestSuite(TestSuite.of(sample_cases))
    assert suite.count() == len(suite.tests()) + 1
    assert list(suite.tests()) == sample_cases


def test_augmented_empty_suite() -> None:
    suite = AugmentedTestSuite(TestSuite())
    assert suite.tests() == ()
    assert suite.count() == 1


def test_task_copy_reference_shares_handle(sample_task) -> None:
    assert sample_task.copy_reference() is sample_task


def test_task_copy_value_is_independent(sample_task) -> None:
    copied = sample_task.copy_value()
    assert copied is not sample_task
    assert copied.suite is not sample_task.suite
    assert copied == sample_task


def test_task_copy_value_keeps_augmented_policy(sample_cases) -> None:
    task = Task("bonus", AugmentedTestSuite(TestSuite.of(sample_cases)))
    copied = task.copy_value()
    assert isinstance(copied.suite, AugmentedTestSuite)
    assert copied.suite.base is not task.suite.base
    assert copied.suite.count() == 3


def test_task_requires_suite() -> None:
    with pytest.raises(InvalidArgument):
        Task("broken", [])  # type: ignore[arg-type]


def test_session_counts_created_suites(sample_cases) -> None:
    session = CheckSession()
    plain = session.new_suite(sample_cases)
    bonus = session.new_suite([TestCase("a", "a", GatedStrategy(5))], augmented=True)
    assert session.suites_created == 2
    assert isinstance(plain, TestSuite)
    assert isinstance(bonus, AugmentedTestSuite)
    assert CheckSession().suites_created == 0
