"""Pathspec-based ignore filtering.

This module uses the pathspec library for gitignore-style ignore patterns,
supporting negation patterns and double-star globs.
"""

from pathlib import Path

import pathspec


def _normalize(path: Path | str) -> str:
    relative_str = str(path).replace("\\", "/")
    while relative_str.startswith("./"):
        relative_str = relative_str[2:]
    return relative_str


class PathspecFilter:
    """File filter built from a list of ignore patterns."""

    def __init__(self, patterns: list[str] | None = None):
        """
        Initialize the filter.

        Args:
            patterns: gitignore-style patterns, matched against paths as given
        """
        self._patterns = list(patterns or [])
        self._spec = pathspec.GitIgnoreSpec.from_lines(self._patterns)

    def should_ignore(self, path: Path | str) -> bool:
        """Check if a path matches the ignore patterns."""
        if not self._patterns:
            return False
        return self._spec.match_file(_normalize(path))


def should_ignore(path: Path | str, patterns: list[str]) -> bool:
    """Check a single path against ignore patterns."""
    return PathspecFilter(patterns).should_ignore(path)
