"""
Core Layer

Data models and fenced code block ranges.
"""

from marklint.core.code_blocks import CodeBlockRanges, is_in_code_block
from marklint.core.models import (
    CodeBlockRange,
    ExtractedLink,
    FileResult,
    LinkCheckResult,
    LintFinding,
    RunResult,
    RunTotals,
)

__all__ = [
    # code_blocks
    "CodeBlockRanges",
    "is_in_code_block",
    # models
    "CodeBlockRange",
    "ExtractedLink",
    "FileResult",
    "LinkCheckResult",
    "LintFinding",
    "RunResult",
    "RunTotals",
]
