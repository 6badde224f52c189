"""Tests for fenced code block ranges."""

from marklint.core.code_blocks import CodeBlockRanges, is_in_code_block
from marklint.core.models import CodeBlockRange


def test_closed_block_includes_fence_lines():
    blocks = CodeBlockRanges.scan(["a", "```python", "x = 1", "```", "b"])
    assert blocks.closed == [CodeBlockRange(2, 4)]
    assert blocks.unclosed_starts == []
    assert blocks.contains(2)
    assert blocks.contains(3)
    assert blocks.contains(4)
    assert not blocks.contains(1)
    assert not blocks.contains(5)


def test_multiple_blocks():
    lines = ["```", "a", "```", "text", "```go", "b", "```"]
    blocks = CodeBlockRanges.scan(lines)
    assert blocks.closed == [CodeBlockRange(1, 3), CodeBlockRange(5, 7)]
    assert not blocks.contains(4)


def test_unclosed_block_is_reported_but_not_excluded():
    blocks = CodeBlockRanges.scan(["intro", "```", "code", "more"])
    assert blocks.closed == []
    assert blocks.unclosed_starts == [1]
    assert not blocks.contains(3)
    assert not blocks.contains(4)


def test_indented_fence_toggles():
    blocks = CodeBlockRanges.scan(["   ```", "x", "  ```"])
    assert blocks.closed == [CodeBlockRange(1, 3)]


def test_tilde_fence_is_not_a_delimiter():
    blocks = CodeBlockRanges.scan(["~~~", "x", "~~~"])
    assert blocks.closed == []
    assert blocks.unclosed_starts == []


def test_is_in_code_block():
    ranges = [CodeBlockRange(2, 4), CodeBlockRange(8, 9)]
    assert is_in_code_block(2, ranges)
    assert is_in_code_block(9, ranges)
    assert not is_in_code_block(5, ranges)
    assert not is_in_code_block(1, [])
