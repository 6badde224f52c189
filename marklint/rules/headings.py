"""
Heading rules

- heading levels: the first heading starts at the configured level and later
  headings never skip a level on the way down
- duplicate headings: heading text is unique within a file
- setext headings: only ATX (`#`) headings are allowed
"""

import re

from marklint.core.code_blocks import CodeBlockRanges
from marklint.core.models import LintFinding


# ============================================================
# Patterns
# ============================================================

ATX_HEADING_PATTERN = re.compile(r"^(#{1,6})\s+")

# CommonMark setext underline: up to three spaces of indentation, a run of
# `=` or `-`, optional trailing whitespace
SETEXT_UNDERLINE_PATTERN = re.compile(r"^ {0,3}(?:=+|-+)\s*$")

EMPTY_LINE_PATTERN = re.compile(r"^\s*$")

# list items and blockquotes
OTHER_BLOCK_PATTERN = re.compile(r"^ {0,3}(?:[*+-]|\d+[.)]|>)\s*")


def check_heading_levels(
    filename: str,
    lines: list[str],
    offset: int,
    code_blocks: CodeBlockRanges,
    min_level: int,
) -> list[LintFinding]:
    """
    Check heading structure.

    Headings inside code blocks are invisible: they neither report nor update
    the previous level.

    Args:
        filename: file being checked
        lines: document lines with frontmatter removed
        offset: number of lines removed before `lines`
        code_blocks: fenced block ranges of `lines`
        min_level: expected level of the first heading

    Returns:
        findings in line order
    """
    findings: list[LintFinding] = []
    prev_level = 0

    for i, line in enumerate(lines):
        if code_blocks.contains(i + 1):
            continue
        match = ATX_HEADING_PATTERN.match(line)
        if not match:
            continue

        level = len(match.group(1))
        if prev_level == 0:
            if level != min_level:
                findings.append(LintFinding(
                    file=filename,
                    line=i + 1 + offset,
                    message=f"First heading should be level {min_level} (found level {level})",
                ))
        elif level > prev_level + 1:
            findings.append(LintFinding(
                file=filename,
                line=i + 1 + offset,
                message=f"Heading level jumped from {prev_level} to {level}",
            ))
        prev_level = level

    return findings


def normalize_heading(line: str) -> str:
    """Heading text without markers, lowercased, surrounding whitespace removed."""
    # str.strip() also removes full-width spaces (U+3000)
    return line.strip().lstrip("#").strip().lower()


def check_duplicate_headings(
    filename: str,
    lines: list[str],
    offset: int,
    code_blocks: CodeBlockRanges,
) -> list[LintFinding]:
    """
    Report every heading whose normalized text was already used.

    Level is ignored, so `# Setup` and `## setup` collide. The first occurrence
    is never reported.
    """
    findings: list[LintFinding] = []
    seen: dict[str, int] = {}

    for i, line in enumerate(lines):
        if code_blocks.contains(i + 1):
            continue
        if not line.strip().startswith("#"):
            continue

        normalized = normalize_heading(line)
        if normalized in seen:
            findings.append(LintFinding(
                file=filename,
                line=i + 1 + offset,
                message=f'duplicate heading: "{normalized}"',
            ))
        else:
            seen[normalized] = i + 1 + offset

    return findings


def check_no_setext_headings(
    filename: str,
    lines: list[str],
    offset: int,
    code_blocks: CodeBlockRanges,
) -> list[LintFinding]:
    """
    Report setext heading underlines.

    An underline only forms a heading when the line before it is paragraph
    text. It is not reported after a blank line, after a list item or
    blockquote marker, or while a blockquote continues lazily onto unmarked
    lines. Lines inside code blocks are skipped without touching that state.
    """
    findings: list[LintFinding] = []
    prev_empty = True
    prev_other_block = False
    in_lazy_blockquote = False

    for i, line in enumerate(lines):
        if code_blocks.contains(i + 1):
            continue

        if SETEXT_UNDERLINE_PATTERN.match(line):
            if not prev_empty and not prev_other_block and not in_lazy_blockquote:
                findings.append(LintFinding(
                    file=filename,
                    line=i + 1 + offset,
                    message="Setext heading found (prefer ATX style instead)",
                ))

        if EMPTY_LINE_PATTERN.match(line):
            prev_empty = True
            prev_other_block = False
            in_lazy_blockquote = False
        elif OTHER_BLOCK_PATTERN.match(line):
            prev_empty = False
            prev_other_block = True
            in_lazy_blockquote = line.strip().startswith(">")
        else:
            prev_empty = False
            prev_other_block = False

    return findings
