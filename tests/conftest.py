"""Shared fixtures."""

import logging
import threading
from unittest.mock import MagicMock

import pytest


class FakeSession:
    """
    Stand-in for requests.Session serving scripted outcomes per URL.

    Each URL maps to a list of outcomes (status codes or exceptions) consumed
    in request order; the last one repeats. Unknown URLs answer `default`.
    """

    def __init__(self, outcomes=None, default=200):
        self.outcomes = {url: list(values) for url, values in (outcomes or {}).items()}
        self.default = default
        self.calls = []
        self._lock = threading.Lock()

    def _next(self, method, url):
        with self._lock:
            self.calls.append((method, url))
            queue = self.outcomes.get(url)
            if not queue:
                outcome = self.default
            elif len(queue) > 1:
                outcome = queue.pop(0)
            else:
                outcome = queue[0]
        if isinstance(outcome, Exception):
            raise outcome
        response = MagicMock()
        response.status_code = outcome
        return response

    def head(self, url, **kwargs):
        return self._next("HEAD", url)

    def get(self, url, **kwargs):
        return self._next("GET", url)

    def count(self, url):
        with self._lock:
            return sum(1 for _, called in self.calls if called == url)


@pytest.fixture
def fake_session():
    """Factory for scripted HTTP sessions."""
    return FakeSession


@pytest.fixture
def waits():
    """Backoff waits recorded instead of slept; pass `sleep=waits.append`."""
    return []


@pytest.fixture(autouse=True)
def reset_marklint_logger():
    """Undo configure_logging so caplog sees records from every test."""
    yield
    logger = logging.getLogger("marklint")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
