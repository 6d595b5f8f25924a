"""Reporting exports."""
from .base import ReportManager, Reporter
from .structured import StructuredReporter, render_report, submission_to_dict
from .terminal import TerminalReporter

__all__ = [
    "ReportManager",
    "Reporter",
    "StructuredReporter",
    "TerminalReporter",
    "render_report",
    "submission_to_dict",
]
