"""Run settings resolved from the environment and CLI overrides."""
from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Any, Mapping, Optional

from solcheck.core.errors import InvalidArgument

REPORT_FORMATS = ("terminal", "json", "yaml")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class CheckSettings:
    workers: int = 1
    timeout_s: Optional[float] = None
    report_format: str = "terminal"
    color: bool = True
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.workers < 1:
            raise InvalidArgument(f"workers must be at least 1 (got {self.workers})")
        if self.timeout_s is not None and self.timeout_s <= 0:
            raise InvalidArgument(f"timeout must be positive (got {self.timeout_s})")
        if self.report_format not in REPORT_FORMATS:
            raise InvalidArgument(
                f"report format must be one of {', '.join(REPORT_FORMATS)} (got '{self.report_format}')"
            )
        if self.log_level not in LOG_LEVELS:
            raise InvalidArgument(
                f"log level must be one of {', '.join(LOG_LEVELS)} (got '{self.log_level}')"
            )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "CheckSettings":
        env = os.environ if environ is None else environ
        values: dict[str, Any] = {}
        if env.get("SOLCHECK_WORKERS"):
            values["workers"] = _parse_int(env["SOLCHECK_WORKERS"], "SOLCHECK_WORKERS")
        if env.get("SOLCHECK_TIMEOUT"):
            values["timeout_s"] = _parse_float(env["SOLCHECK_TIMEOUT"], "SOLCHECK_TIMEOUT")
        if env.get("SOLCHECK_REPORT"):
            values["report_format"] = env["SOLCHECK_REPORT"].strip().lower()
        if env.get("SOLCHECK_NO_COLOR"):
            values["color"] = env["SOLCHECK_NO_COLOR"].strip().lower() not in _TRUTHY
        if env.get("SOLCHECK_LOG_LEVEL"):
            values["log_level"] = env["SOLCHECK_LOG_LEVEL"].strip().upper()
        return cls(**values)

    def merged(self, **overrides: Any) -> "CheckSettings":
        """Return a copy with every non-``None`` override applied."""

        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes)


def _parse_int(raw: str, name: str) -> int:
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise InvalidArgument(f"{name} must be an integer (got '{raw}')") from exc


def _parse_float(raw: str, name: str) -> float:
    try:
        return float(raw.strip())
    except ValueError as exc:
        raise InvalidArgument(f"{name} must be a number (got '{raw}')") from exc
