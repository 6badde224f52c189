"""
Reporter interface
"""

from typing import Protocol

from marklint.core.models import RunResult


class Reporter(Protocol):
    """Renders a finished lint run."""

    def report(self, result: RunResult, elapsed_seconds: float, link_check_enabled: bool) -> None:
        ...
