"""
Fenced code block ranges

Rules about prose structure must not look inside fenced code, so every checker
asks this module whether a line belongs to a closed ``` block.
"""

from dataclasses import dataclass, field

from marklint.core.models import CodeBlockRange

FENCE_MARKER = "```"


def is_in_code_block(line: int, ranges: list[CodeBlockRange]) -> bool:
    """
    Check whether a 1-based line falls within a closed code block.

    Both fence lines count as part of the block.
    """
    for block in ranges:
        if line in block:
            return True
    return False


@dataclass
class CodeBlockRanges:
    """
    Closed fenced blocks of a document plus any dangling opening fence

    Attributes:
        closed: closed blocks, 1-based and inclusive of the fence lines
        unclosed_starts: 0-based indexes of opening fences that never close
    """
    closed: list[CodeBlockRange] = field(default_factory=list)
    unclosed_starts: list[int] = field(default_factory=list)

    @classmethod
    def scan(cls, lines: list[str]) -> "CodeBlockRanges":
        """
        Scan lines for fence delimiters.

        Any line whose trimmed content starts with ``` toggles the block state,
        whatever info string the opening fence carried. Nested fences are not
        supported. An unclosed block does not extend to the end of the file,
        so lines after a dangling fence are still checked as ordinary text.

        Args:
            lines: document lines (frontmatter already stripped)

        Returns:
            CodeBlockRanges for the document
        """
        closed: list[CodeBlockRange] = []
        unclosed: list[int] = []
        in_block = False
        start = 0

        for i, line in enumerate(lines):
            if not line.strip().startswith(FENCE_MARKER):
                continue
            if in_block:
                closed.append(CodeBlockRange(start + 1, i + 1))
                in_block = False
            else:
                start = i
                in_block = True

        if in_block:
            unclosed.append(start)

        return cls(closed=closed, unclosed_starts=unclosed)

    def contains(self, line: int) -> bool:
        return is_in_code_block(line, self.closed)
