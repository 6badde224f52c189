"""
Block rules - unclosed code fences and images without alt text
"""

import re

from marklint.core.code_blocks import CodeBlockRanges
from marklint.core.models import LintFinding

EMPTY_ALT_IMAGE_PATTERN = re.compile(r"!\[\s*\]\([^)]+\)")


def check_unclosed_code_blocks(
    filename: str,
    lines: list[str],
    offset: int,
    code_blocks: CodeBlockRanges,
) -> list[LintFinding]:
    """Report the opening fence of every code block that is never closed."""
    return [
        LintFinding(file=filename, line=start + offset + 1, message="Unclosed code block")
        for start in code_blocks.unclosed_starts
    ]


def check_empty_alt_text(
    filename: str,
    lines: list[str],
    offset: int,
    code_blocks: CodeBlockRanges,
) -> list[LintFinding]:
    """Report images written as `![](...)` or with whitespace-only alt text."""
    findings: list[LintFinding] = []
    for i, line in enumerate(lines):
        if code_blocks.contains(i + 1):
            continue
        if EMPTY_ALT_IMAGE_PATTERN.search(line):
            findings.append(LintFinding(
                file=filename,
                line=i + 1 + offset,
                message="image with empty alt text",
            ))
    return findings
