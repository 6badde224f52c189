"""
External link extractor

Finds http(s) URLs written as inline links, images or bare URLs.
"""

import re

from marklint.core.models import ExtractedLink


# ============================================================
# Patterns (applied in this order)
# ============================================================

# [text](https://example.com)
INLINE_LINK_PATTERN = re.compile(r"\[[^\]]*\]\((https?://[^\s)]+)\)")

# ![alt](https://example.com/image.png)
IMAGE_LINK_PATTERN = re.compile(r"!\[[^\]]*\]\((https?://[^\s)]+)\)")

# https://example.com
BARE_URL_PATTERN = re.compile(r"(https?://[^\s<>()\[\]]+)")

# sentence punctuation and closing quotes after a bare URL
BARE_URL_TRAILING = "\"'.,;:"

LINK_PATTERNS: tuple[re.Pattern, ...] = (
    INLINE_LINK_PATTERN,
    IMAGE_LINK_PATTERN,
    BARE_URL_PATTERN,
)


def extract_external_links_with_line_numbers(
    lines: list[str],
    offset: int = 0,
) -> list[ExtractedLink]:
    """
    Extract external URLs together with the line they appear on.

    A URL is reported once per line even when several patterns match it, for
    example `[docs](https://a.io)` is found by both the inline and the bare
    pattern. The same URL on another line is a separate link.

    Args:
        lines: document lines
        offset: added to every reported line number

    Returns:
        links in line order, then pattern order
    """
    results: list[ExtractedLink] = []

    for i, line in enumerate(lines):
        if "http" not in line:
            continue
        seen: set[str] = set()
        for pattern in LINK_PATTERNS:
            for match in pattern.finditer(line):
                url = match.group(1)
                if pattern is BARE_URL_PATTERN:
                    url = url.rstrip(BARE_URL_TRAILING)
                if url in seen:
                    continue
                seen.add(url)
                results.append(ExtractedLink(url=url, line=i + 1 + offset))

    return results
