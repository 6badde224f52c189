"""
Reporters Layer

Text (Rich) and JSON reports of a lint run.
"""

from marklint.reporters.base import Reporter
from marklint.reporters.json_reporter import JsonReporter, build_report
from marklint.reporters.rich_reporter import TextReporter, format_elapsed

__all__ = [
    "Reporter",
    "TextReporter",
    "JsonReporter",
    "build_report",
    "format_elapsed",
]
