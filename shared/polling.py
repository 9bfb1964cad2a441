"""Bounded polling for conditions Playwright's ``expect`` cannot express."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import TypeVar

from shared.errors import ActionTimeout, ScenarioError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def wait_until(
    predicate: Callable[[], T],
    *,
    timeout: float = 5.0,
    interval: float = 0.25,
    description: str = "condition",
) -> T:
    """
    Call ``predicate`` until it returns a truthy value or ``timeout`` elapses.

    The predicate is always evaluated at least once.  A ``ScenarioError``
    raised by the predicate (e.g. a script context destroyed by a reload)
    counts as a failed attempt; the last one is chained to the timeout.

    Args:
        predicate: Zero-argument callable; its first truthy result is returned.
        timeout: Maximum wait time in seconds.
        interval: Pause between attempts in seconds.
        description: Human-readable name used in the timeout message.

    Returns:
        The first truthy value returned by ``predicate``.

    Raises:
        ActionTimeout: If the predicate never returned a truthy value.
    """
    deadline = time.monotonic() + timeout
    attempts = 0
    last_error: ScenarioError | None = None
    while True:
        attempts += 1
        try:
            result = predicate()
        except ScenarioError as exc:
            logger.debug("%s attempt %d failed: %s", description, attempts, exc)
            last_error = exc
            result = None
        if result:
            logger.debug("%s satisfied after %d attempt(s)", description, attempts)
            return result
        if time.monotonic() >= deadline:
            break
        time.sleep(interval)
    raise ActionTimeout(description, timeout * 1000) from last_error
