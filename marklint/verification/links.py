"""External link verification.

This module checks that http(s) links in a document resolve:
- each distinct URL is requested once per file, findings fan out to every
  line that references it
- results are shared across files through a thread-safe cache
- checks run concurrently on a bounded thread pool
- transient failures are retried with a linear backoff
"""

import logging
import re
import threading
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Callable, Optional

import requests
from requests.adapters import HTTPAdapter

from marklint import __version__
from marklint.core.code_blocks import CodeBlockRanges
from marklint.core.models import LinkCheckResult, LintFinding
from marklint.parsing.links import extract_external_links_with_line_numbers

logger = logging.getLogger(__name__)


# ============================================================
# Constants
# ============================================================

DEFAULT_TIMEOUT_SECONDS = 5
DEFAULT_RETRY_DELAY_MS = 1000
DEFAULT_MAX_RETRIES = 2
DEFAULT_MAX_CONCURRENCY = 10

# Responses that will not change on a retry
NO_RETRY_STATUSES = frozenset({401, 404})

USER_AGENT = f"marklint/{__version__}"


def format_link_error(url: str) -> str:
    return f"Link unreachable: {url}"


def compile_skip_patterns(patterns: list[str]) -> list[re.Pattern]:
    """
    Compile skip patterns, dropping the ones that are not valid regexes.

    Args:
        patterns: regex sources

    Returns:
        compiled patterns in input order
    """
    compiled: list[re.Pattern] = []
    for pattern in patterns:
        try:
            compiled.append(re.compile(pattern))
        except re.error as e:
            logger.warning(f"Invalid skip-link-pattern: {pattern} (error: {e})")
    return compiled


def should_skip_link(url: str, skip_patterns: list[re.Pattern]) -> bool:
    return any(pattern.search(url) for pattern in skip_patterns)


class LinkCache:
    """Run-scoped URL -> LinkCheckResult map, safe for concurrent use."""

    def __init__(self):
        self._entries: dict[str, LinkCheckResult] = {}
        self._lock = threading.Lock()

    def get(self, url: str) -> Optional[LinkCheckResult]:
        """Cached result for `url`, or None."""
        with self._lock:
            return self._entries.get(url)

    def put(self, url: str, result: LinkCheckResult) -> None:
        with self._lock:
            self._entries[url] = result

    def __contains__(self, url: str) -> bool:
        return self.get(url) is not None


class ExternalLinkVerifier:
    """Checks external links over HTTP."""

    def __init__(
        self,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        retry_delay_ms: int = DEFAULT_RETRY_DELAY_MS,
        max_retries: int = DEFAULT_MAX_RETRIES,
        max_concurrency: int = DEFAULT_MAX_CONCURRENCY,
        sleep: Callable[[float], None] = time.sleep,
        pool_size: int | None = None,
    ):
        """
        Initialize the verifier.

        Args:
            session: HTTP session to issue requests with (a new one by default)
            timeout: per-request timeout in seconds
            retry_delay_ms: base backoff, attempt N waits N * retry_delay_ms
            max_retries: retries after the first attempt
            max_concurrency: URLs checked at the same time for one file
            sleep: used for the backoff wait
            pool_size: connections kept per host by a new session (defaults to
                max_concurrency); size it to every thread sharing the verifier
        """
        if session is None:
            session = requests.Session()
            session.headers["User-Agent"] = USER_AGENT
            adapter = HTTPAdapter(pool_maxsize=pool_size or max_concurrency)
            session.mount("http://", adapter)
            session.mount("https://", adapter)
        self.session = session
        self.timeout = timeout
        self.retry_delay_ms = retry_delay_ms
        self.max_retries = max_retries
        self.max_concurrency = max_concurrency
        self._sleep = sleep

    def _request(self, url: str) -> LinkCheckResult:
        """One HEAD request, falling back to GET when HEAD cannot be sent."""
        try:
            response = self.session.head(url, timeout=self.timeout, allow_redirects=True)
        except (requests.RequestException, ValueError) as head_error:
            logger.debug(f"HEAD {url} failed, trying GET: {head_error}")
            try:
                response = self.session.get(
                    url, timeout=self.timeout, allow_redirects=True, stream=True
                )
            except (requests.RequestException, ValueError) as e:
                logger.debug(f"GET {url} failed: {e}")
                return LinkCheckResult(status=0, error=str(e))

        status = response.status_code
        response.close()
        return LinkCheckResult(status=status)

    @staticmethod
    def _should_retry(result: LinkCheckResult) -> bool:
        if result.error is not None:
            return True
        if result.status in NO_RETRY_STATUSES:
            return False
        return result.status >= 400

    def check_url(self, url: str) -> LinkCheckResult:
        """
        Check a single URL.

        Transport errors and error statuses are retried up to `max_retries`
        times; 404 and 401 are final on the first answer.

        Returns:
            the last result obtained
        """
        result = self._request(url)
        for attempt in range(1, self.max_retries + 1):
            if not self._should_retry(result):
                break
            logger.debug(
                f"Retrying {url} (attempt {attempt}/{self.max_retries}): "
                f"{result.error or result.status}"
            )
            self._sleep(self.retry_delay_ms * attempt / 1000)
            result = self._request(url)
        return result

    def resolve(self, url: str, cache: LinkCache) -> LinkCheckResult:
        """Cached result for `url`, checking and caching it on a miss."""
        cached = cache.get(url)
        if cached is not None:
            return cached
        # Two files may miss on the same URL at once; both store the same answer.
        result = self.check_url(url)
        cache.put(url, result)
        return result

    def check(
        self,
        filename: str,
        lines: list[str],
        offset: int,
        skip_patterns: list[re.Pattern],
        cache: LinkCache | None = None,
    ) -> tuple[list[LintFinding], int]:
        """
        Verify every external link of a document.

        Links inside fenced code blocks and links matching a skip pattern are
        ignored. Blocks until all URLs are resolved.

        Args:
            filename: file being checked
            lines: document lines with frontmatter removed
            offset: number of lines removed before `lines`
            skip_patterns: compiled patterns of URLs not to check
            cache: shared result cache (a private one when omitted)

        Returns:
            (findings sorted by line, number of distinct URLs checked)
        """
        if cache is None:
            cache = LinkCache()

        code_blocks = CodeBlockRanges.scan(lines)
        lines_by_url: dict[str, list[int]] = {}
        for link in extract_external_links_with_line_numbers(lines, offset):
            if code_blocks.contains(link.line - offset):
                continue
            if should_skip_link(link.url, skip_patterns):
                continue
            lines_by_url.setdefault(link.url, []).append(link.line)

        if not lines_by_url:
            return [], 0

        findings: list[LintFinding] = []
        findings_lock = threading.Lock()

        def verify(url: str, url_lines: list[int]) -> None:
            result = self.resolve(url, cache)
            if result.reachable:
                return
            group = [
                LintFinding(file=filename, line=line, message=format_link_error(url))
                for line in url_lines
            ]
            with findings_lock:
                findings.extend(group)

        workers = min(self.max_concurrency, len(lines_by_url))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = [
                executor.submit(verify, url, url_lines)
                for url, url_lines in lines_by_url.items()
            ]
            for future in as_completed(futures):
                future.result()

        findings.sort(key=lambda f: (f.line, f.message))
        return findings, len(lines_by_url)


def check_external_links(
    filename: str,
    lines: list[str],
    offset: int,
    skip_patterns: list[re.Pattern],
    timeout_seconds: float,
    retry_delay_ms: int,
    cache: LinkCache,
    session: requests.Session | None = None,
) -> tuple[list[LintFinding], int]:
    """Verify the external links of one document with a default verifier."""
    verifier = ExternalLinkVerifier(
        session=session,
        timeout=timeout_seconds,
        retry_delay_ms=retry_delay_ms,
    )
    return verifier.check(filename, lines, offset, skip_patterns, cache)
