import logging

import pytest

from solcheck.core import ExactStrategy, GatedStrategy, InvalidArgument, parse_strategy


@pytest.mark.parametrize("value", ["", "a", "input2", "Ünïcode"])
def test_exact_accepts_equal_values(value: str) -> None:
    assert ExactStrategy().evaluate(value, value)


def test_exact_rejects_different_values() -> None:
    assert not ExactStrategy().evaluate("input1", "expected1")


@pytest.mark.parametrize("threshold", [-1, 0, 1, 2])
def test_gated_at_or_below_minimum_never_passes(threshold: int) -> None:
    strategy = GatedStrategy(threshold)
    assert not strategy.evaluate("same", "same")
    assert not strategy.evaluate("a", "b")


@pytest.mark.parametrize("threshold", [3, 5, 100])
def test_gated_above_minimum_behaves_like_exact(threshold: int) -> None:
    strategy = GatedStrategy(threshold)
    assert strategy.evaluate("same", "same")
    assert not strategy.evaluate("a", "b")


def test_gated_logs_complexity_level(caplog) -> None:
    with caplog.at_level(logging.DEBUG, logger="solcheck.core.strategies"):
        GatedStrategy(4).evaluate("x", "x")
    assert "complexity level: 4" in caplog.text


@pytest.mark.parametrize("strategy", [ExactStrategy(), GatedStrategy(3)])
def test_missing_arguments_fail_fast(strategy) -> None:
    with pytest.raises(InvalidArgument):
        strategy.evaluate(None, "x")
    with pytest.raises(InvalidArgument):
        strategy.evaluate("x", None)
    with pytest.raises(InvalidArgument):
        strategy.evaluate("x", 1)


def test_gated_threshold_must_be_integer() -> None:
    with pytest.raises(InvalidArgument):
        GatedStrategy("3")
    with pytest.raises(InvalidArgument):
        GatedStrategy(True)


def test_strategies_are_immutable() -> None:
    strategy = GatedStrategy(3)
    with pytest.raises(AttributeError):
        strategy.threshold = 1  # type: ignore[misc]


def test_parse_strategy() -> None:
    assert parse_strategy("exact") == ExactStrategy()
    assert parse_strategy(" Gated:7 ") == GatedStrategy(7)
    assert parse_strategy("exact").describe() == "exact"
    assert parse_strategy("gated:3").describe() == "gated(3)"


@pytest.mark.parametrize("text", ["", "fuzzy", "gated", "gated:x"])
def test_parse_strategy_rejects_unknown(text: str) -> None:
    with pytest.raises(InvalidArgument):
        parse_strategy(text)
