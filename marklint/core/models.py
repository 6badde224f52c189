"""
Data models

All value types shared by the rule checkers, the link verifier and the linter.
"""

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class LintFinding:
    """
    A single reported lint issue

    Attributes:
        file: path of the file the issue was found in
        line: 1-based line number in the original file (frontmatter included)
        message: human readable description
    """
    file: str
    line: int
    message: str

    def to_dict(self) -> dict[str, Any]:
        """Serialize using the keys of the JSON report."""
        return {
            "File": self.file,
            "Line": self.line,
            "Message": self.message,
        }


@dataclass(frozen=True)
class CodeBlockRange:
    """
    A closed fenced code block

    Attributes:
        start_line: line of the opening fence (1-based, inclusive)
        end_line: line of the closing fence (1-based, inclusive)
    """
    start_line: int
    end_line: int

    def __contains__(self, line: int) -> bool:
        return self.start_line <= line <= self.end_line


@dataclass(frozen=True)
class ExtractedLink:
    """
    An external URL found in a document

    Attributes:
        url: the raw URL as written
        line: 1-based line number (offset already applied)
    """
    url: str
    line: int


@dataclass(frozen=True)
class LinkCheckResult:
    """
    Outcome of checking one URL, stored in the shared link cache

    Attributes:
        status: final HTTP status code (0 when no response was received)
        error: transport error description, if the request never succeeded
    """
    status: int
    error: Optional[str] = None

    @property
    def reachable(self) -> bool:
        return self.error is None and 0 < self.status < 400


@dataclass
class FileResult:
    """Lint outcome for one file."""
    findings: list[LintFinding] = field(default_factory=list)
    line_count: int = 0
    links_checked: int = 0


@dataclass
class RunTotals:
    files: int = 0
    errors: int = 0
    lines: int = 0
    links_checked: int = 0


@dataclass
class RunResult:
    """
    Aggregated outcome of a lint run

    Attributes:
        findings_by_file: findings per successfully read file
        ordered_paths: sorted paths of successfully read files
        totals: summed counters over all files
        failed_files: path -> error description for files that could not be read
    """
    findings_by_file: dict[str, list[LintFinding]] = field(default_factory=dict)
    ordered_paths: list[str] = field(default_factory=list)
    totals: RunTotals = field(default_factory=RunTotals)
    failed_files: dict[str, str] = field(default_factory=dict)
