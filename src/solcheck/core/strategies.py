"""Comparison strategies deciding whether a test case passes."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union

from .errors import InvalidArgument

logger = logging.getLogger(__name__)

# Gated strategies only certify equality above this complexity level.
GATE_MINIMUM = 2


def _require_text(value: object, name: str) -> str:
    if value is None:
        raise InvalidArgument(f"Comparison argument '{name}' is missing")
    if not isinstance(value, str):
        raise InvalidArgument(
            f"Comparison argument '{name}' must be a string, got {type(value).__name__}"
        )
    return value


@dataclass(frozen=True)
class ExactStrategy:
    """Passes when input and expected are equal."""

    def evaluate(self, input: str, expected: str) -> bool:
        return _require_text(input, "input") == _require_text(expected, "expected")

    def describe(self) -> str:
        return "exact"


@dataclass(frozen=True)
class GatedStrategy:
    """Exact comparison that only passes above a configured complexity level."""

    threshold: int

    def __post_init__(self) -> None:
        if isinstance(self.threshold, bool) or not isinstance(self.threshold, int):
            raise InvalidArgument(f"Gated threshold must be an integer, got {self.threshold!r}")

    def evaluate(self, input: str, expected: str) -> bool:
        equal = _require_text(input, "input") == _require_text(expected, "expected")
        logger.debug("Executing with complexity level: %d", self.threshold)
        return equal and self.threshold > GATE_MINIMUM

    def describe(self) -> str:
        return f"gated({self.threshold})"


ComparisonStrategy = Union[ExactStrategy, GatedStrategy]

STRATEGY_TYPES = (ExactStrategy, GatedStrategy)


def is_strategy(value: object) -> bool:
    return isinstance(value, STRATEGY_TYPES)


def parse_strategy(text: str) -> ComparisonStrategy:
    """Parse ``exact`` or ``gated:N`` into a strategy instance."""

    normalized = (text or "").strip().lower()
    if normalized == "exact":
        return ExactStrategy()
    name, sep, raw = normalized.partition(":")
    if name == "gated" and sep:
        try:
            threshold = int(raw.strip())
        except ValueError as exc:
            raise InvalidArgument(f"Invalid gated threshold '{raw}'") from exc
        return GatedStrategy(threshold)
    raise InvalidArgument(f"Unknown comparison strategy '{text}' (expected 'exact' or 'gated:N')")
