"""
Blank line rules
"""

from marklint.core.code_blocks import CodeBlockRanges
from marklint.core.models import LintFinding


def check_no_multiple_blank_lines(
    filename: str,
    lines: list[str],
    offset: int,
    code_blocks: CodeBlockRanges,
) -> list[LintFinding]:
    """
    Report every blank line that follows another blank line.

    Lines inside code blocks are skipped entirely: they neither extend nor
    break a run of blank lines.
    """
    findings: list[LintFinding] = []
    consecutive = 0

    for i, line in enumerate(lines):
        if code_blocks.contains(i + 1):
            continue
        if line.strip():
            consecutive = 0
            continue

        consecutive += 1
        if consecutive > 1:
            findings.append(LintFinding(
                file=filename,
                line=i + 1 + offset,
                message="Multiple consecutive blank lines",
            ))

    return findings


def check_final_blank_line(
    filename: str,
    lines: list[str],
    offset: int,
    code_blocks: CodeBlockRanges | None = None,
) -> list[LintFinding]:
    """
    Require the document to end with a newline.

    `lines` comes from splitting on "\\n", so a trailing newline shows up as a
    final empty element. Code blocks play no part in this check.
    """
    if len(lines) < 2 or lines[-1] != "":
        return [LintFinding(
            file=filename,
            line=len(lines) + offset,
            message="Missing final blank line",
        )]
    return []
