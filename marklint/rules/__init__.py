"""
Rules Layer - lint rule checkers

Every checker takes (filename, lines, offset, code_blocks, ...) and returns
findings in line order. Checkers are independent of each other.
"""

from marklint.rules.blocks import check_empty_alt_text, check_unclosed_code_blocks
from marklint.rules.headings import (
    check_duplicate_headings,
    check_heading_levels,
    check_no_setext_headings,
    normalize_heading,
)
from marklint.rules.whitespace import check_final_blank_line, check_no_multiple_blank_lines

__all__ = [
    # blocks
    "check_unclosed_code_blocks",
    "check_empty_alt_text",
    # headings
    "check_heading_levels",
    "check_duplicate_headings",
    "check_no_setext_headings",
    "normalize_heading",
    # whitespace
    "check_no_multiple_blank_lines",
    "check_final_blank_line",
]
