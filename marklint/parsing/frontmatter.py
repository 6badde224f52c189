"""
YAML frontmatter handling

Frontmatter is removed before linting; the number of removed lines is kept so
findings can be reported against the original file.
"""

FRONTMATTER_DELIMITER = "---"


def _frontmatter_end(lines: list[str]) -> int | None:
    """Index of the closing delimiter, or None when there is no complete block."""
    if not lines or lines[0].strip() != FRONTMATTER_DELIMITER:
        return None
    for i in range(1, len(lines)):
        if lines[i].strip() == FRONTMATTER_DELIMITER:
            return i
    return None


def strip_frontmatter(content: str) -> tuple[str, int]:
    """
    Remove a leading frontmatter block.

    The block runs from a first line of `---` to the next `---` line. Blank
    lines right after the closing delimiter are removed as well. An unclosed
    block is left untouched.

    Args:
        content: raw file content

    Returns:
        (body, number of lines removed)
    """
    lines = content.split("\n")
    end = _frontmatter_end(lines)
    if end is None:
        return content, 0

    skip = end + 1
    while skip < len(lines) and lines[skip].strip() == "":
        skip += 1
    return "\n".join(lines[skip:]), skip
