"""
Filters Layer

File discovery and ignore-pattern matching.
"""

from marklint.filters.expand import expand_paths, read_file
from marklint.filters.pathspec_filter import PathspecFilter, should_ignore

__all__ = [
    "PathspecFilter",
    "should_ignore",
    "expand_paths",
    "read_file",
]
