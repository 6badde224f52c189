"""
JSON reporter - machine readable report
"""

import json
import sys
from typing import Any, TextIO

from marklint.core.models import RunResult


def build_report(result: RunResult, elapsed_seconds: float, link_check_enabled: bool) -> dict[str, Any]:
    """Report structure; `links_checked` is only present when links were checked."""
    report_data: dict[str, Any] = {
        "files": result.totals.files,
        "lines": result.totals.lines,
        "errors": result.totals.errors,
    }
    if link_check_enabled:
        report_data["links_checked"] = result.totals.links_checked
    report_data["elapsed_ms"] = int(elapsed_seconds * 1000)
    report_data["details"] = {
        path: [finding.to_dict() for finding in result.findings_by_file[path]]
        for path in result.ordered_paths
    }
    return report_data


class JsonReporter:
    """JSON reporter"""

    def __init__(self, output: TextIO | None = None):
        self.output = output or sys.stdout

    def report(self, result: RunResult, elapsed_seconds: float, link_check_enabled: bool) -> None:
        report_data = build_report(result, elapsed_seconds, link_check_enabled)
        json_str = json.dumps(report_data, indent=2, ensure_ascii=False)
        print(json_str, file=self.output)
