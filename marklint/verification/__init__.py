"""
Verification Layer

Network verification of external links.
"""

from marklint.verification.links import (
    DEFAULT_MAX_CONCURRENCY,
    DEFAULT_MAX_RETRIES,
    DEFAULT_RETRY_DELAY_MS,
    DEFAULT_TIMEOUT_SECONDS,
    ExternalLinkVerifier,
    LinkCache,
    check_external_links,
    compile_skip_patterns,
    format_link_error,
    should_skip_link,
)

__all__ = [
    "DEFAULT_MAX_CONCURRENCY",
    "DEFAULT_MAX_RETRIES",
    "DEFAULT_RETRY_DELAY_MS",
    "DEFAULT_TIMEOUT_SECONDS",
    "ExternalLinkVerifier",
    "LinkCache",
    "check_external_links",
    "compile_skip_patterns",
    "format_link_error",
    "should_skip_link",
]
