"""
Soft assertions: record mismatches, keep going, fail once at the end.

Collection-wide checks ("every image loaded") are more useful when they
report *all* offenders instead of stopping at the first one.  A
``SoftAssertions`` instance collects failures; ``assert_all`` logs a
summary and raises a single ``AssertionMismatch`` listing them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from shared.errors import AssertionMismatch

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SoftFailure:
    """One recorded mismatch."""

    message: str
    expected: Any = None
    actual: Any = None

    def __str__(self) -> str:
        return f"{self.message} (expected: {self.expected!r}, actual: {self.actual!r})"


class SoftAssertions:
    """Collector for non-fatal checks within a single scenario."""

    def __init__(self, name: str = "soft assertions"):
        self.name = name
        self.checked = 0
        self.failures: list[SoftFailure] = []

    def check(self, condition: bool, message: str, *, expected: Any = None, actual: Any = None) -> bool:
        """Record a failure when ``condition`` is false; return ``condition``."""
        self.checked += 1
        if not condition:
            self.failures.append(SoftFailure(message, expected, actual))
        return bool(condition)

    def check_equal(self, actual: Any, expected: Any, message: str) -> bool:
        return self.check(actual == expected, message, expected=expected, actual=actual)

    def check_greater(self, actual: float, threshold: float, message: str) -> bool:
        return self.check(actual > threshold, message, expected=f"> {threshold}", actual=actual)

    @property
    def passed(self) -> bool:
        return not self.failures

    def assert_all(self) -> None:
        """
        Raise if any check failed.

        Raises:
            AssertionMismatch: Listing every recorded failure, with the
                number of failed checks as ``actual``.
        """
        logger.info(
            "%s: %d checked, %d failed", self.name, self.checked, len(self.failures)
        )
        if self.passed:
            return
        for failure in self.failures:
            logger.warning("%s: %s", self.name, failure)
        details = "\n".join(f"  - {failure}" for failure in self.failures)
        raise AssertionMismatch(
            f"{len(self.failures)} of {self.checked} {self.name} failed:\n{details}",
            expected=0,
            actual=len(self.failures),
        )
