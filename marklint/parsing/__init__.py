"""
Parsing Layer

Frontmatter stripping and external link extraction.
"""

from marklint.parsing.frontmatter import strip_frontmatter
from marklint.parsing.links import extract_external_links_with_line_numbers

__all__ = [
    "strip_frontmatter",
    "extract_external_links_with_line_numbers",
]
