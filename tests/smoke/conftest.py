"""
Smoke-test fixtures for the site under test.

Provides the ``smoke_base_url`` session-scoped fixture that yields a
reachable base URL shared across the entire smoke suite.  URL resolution
is delegated to :func:`shared.live_site.live_site_url`.
"""

from __future__ import annotations

from collections.abc import Generator

import pytest

from config import get_config
from shared.live_site import live_site_url


@pytest.fixture(scope="session")
def smoke_base_url() -> Generator[str, None, None]:
    """Yield a reachable base URL for smoke tests."""
    yield from live_site_url()


@pytest.fixture(scope="session")
def http_timeout() -> int:
    return get_config().HTTP_TIMEOUT_S
