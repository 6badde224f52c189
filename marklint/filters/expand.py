"""
File discovery - turn command line paths into the Markdown files to lint
"""

import os
from pathlib import Path

from marklint.filters.pathspec_filter import PathspecFilter

MARKDOWN_SUFFIX = ".md"


def _walk_markdown(root: str) -> list[str]:
    """Markdown files under `root`, skipping hidden and symlinked directories."""
    results: list[str] = []
    for dirpath, dirnames, filenames in os.walk(root, followlinks=False):
        dirnames[:] = sorted(
            d for d in dirnames
            if not d.startswith(".") and not os.path.islink(os.path.join(dirpath, d))
        )
        for name in sorted(filenames):
            if name.endswith(MARKDOWN_SUFFIX):
                results.append(os.path.join(dirpath, name))
    return results


def expand_paths(paths: list[str], ignore_patterns: list[str] | None = None) -> list[str]:
    """
    Expand files and directories into a list of Markdown files.

    - directories are searched recursively for files ending in .md
    - hidden directories (.git/ and the like) are skipped
    - paths that do not exist are skipped silently
    - symbolic links to directories are not followed

    Example:
        expand_paths(["docs", "README.md"])
        -> ["docs/a.md", "docs/sub/b.md", "README.md"]

    Args:
        paths: files or directories
        ignore_patterns: gitignore-style patterns of files to leave out

    Returns:
        Markdown file paths, in input order
    """
    path_filter = PathspecFilter(ignore_patterns)
    results: list[str] = []

    for p in paths:
        if os.path.isdir(p):
            candidates = _walk_markdown(p)
        elif os.path.isfile(p) and p.endswith(MARKDOWN_SUFFIX):
            candidates = [p]
        else:
            continue

        results.extend(c for c in candidates if not path_filter.should_ignore(c))

    return results


def read_file(path: str) -> str:
    """Read a file as UTF-8 text, replacing undecodable bytes."""
    return Path(path).read_text(encoding="utf-8", errors="replace")
