"""Reachability helpers for the site under test, shared by smoke and E2E suites."""

from __future__ import annotations

import logging
import os
import time
from collections.abc import Generator

import requests

from config import get_config

logger = logging.getLogger(__name__)


def is_site_ready(url: str, timeout: int = 5) -> bool:
    """Return True when the landing page answers with a non-5xx status."""
    try:
        response = requests.get(f"{url}/", timeout=timeout)
    except requests.RequestException:
        return False
    return response.status_code < 500


def wait_for_site_ready(url: str, timeout: int = 60, interval: int = 2) -> None:
    """Poll the landing page until ready or timeout."""
    deadline = time.time() + timeout
    while time.time() < deadline:
        if is_site_ready(url):
            logger.info("Site at %s is ready", url)
            return
        logger.info("Waiting for site at %s", url)
        time.sleep(interval)
    raise RuntimeError(f"Site at {url} not reachable after {timeout}s")


def live_site_url(*, base_url_env: str = "THE_INTERNET_BASE_URL") -> Generator[str, None, None]:
    """
    Yield a reachable base URL for the site under test.

    Priority:
    1. Use explicit base URL from `base_url_env`.
    2. Fall back to the configured environment's BASE_URL.

    Either way the URL is polled until it answers before being yielded.
    """
    settings = get_config()
    base_url = (os.getenv(base_url_env) or settings.BASE_URL).rstrip("/")
    logger.info("Using %s for %s", base_url, settings.__name__)
    wait_for_site_ready(base_url, timeout=settings.SITE_READY_TIMEOUT_S)
    yield base_url
