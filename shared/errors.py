"""
Error kinds raised by the E2E suite.

Playwright raises its own ``Error``/``TimeoutError`` types; page objects
translate them into these so a failing case reports *what kind* of step
broke (navigation, an action, an in-page script) rather than a bare
driver error.  ``AssertionMismatch`` derives from ``AssertionError`` so
pytest still reports it as an ordinary assertion failure.
"""

from __future__ import annotations

from typing import Any


class ScenarioError(Exception):
    """Base class for errors raised by scenario steps."""


class NavigationError(ScenarioError):
    """Target unreachable, or answered with a status treated as fatal."""

    def __init__(self, url: str, reason: str, status: int | None = None):
        self.url = url
        self.status = status
        detail = f"status {status}" if status is not None else reason
        super().__init__(f"Navigation to {url} failed: {detail}")


class ActionTimeout(ScenarioError):
    """Target element never became actionable within the bound."""

    def __init__(self, target: str, timeout_ms: float | None = None):
        self.target = target
        self.timeout_ms = timeout_ms
        bound = f" within {timeout_ms:g}ms" if timeout_ms is not None else ""
        super().__init__(f"{target} did not become actionable{bound}")


class EvaluationError(ScenarioError):
    """An in-page script threw."""


class AssertionMismatch(AssertionError):
    """Observed value differs from the expected one."""

    def __init__(self, message: str, expected: Any = None, actual: Any = None):
        self.expected = expected
        self.actual = actual
        super().__init__(f"{message} (expected: {expected!r}, actual: {actual!r})")
