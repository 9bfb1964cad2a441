"""
Ordered request-interception rules for Playwright pages.

Playwright's own ``page.route`` handlers run newest-first.  Scenarios here
want a plain rule table instead: rules are checked in the order they were
registered, the first match decides what happens to the request, and
anything unmatched goes through untouched.  Every matched URL is recorded,
which is how a scenario proves a click *tried* to leave the site without
actually following the link.
"""

from __future__ import annotations

import fnmatch
import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Union

from playwright.sync_api import Page, Route

logger = logging.getLogger(__name__)

RouteAction = Union[str, Callable[[Route], Any]]

ACTIONS = ("abort", "continue", "fulfill")

# In Playwright globs "?" and "[" are literal; fnmatch would treat them as wildcards
_FNMATCH_SPECIALS = re.compile(r"([?\[])")


def _escape_glob(pattern: str) -> str:
    return _FNMATCH_SPECIALS.sub(r"[\1]", pattern)


@dataclass(frozen=True)
class RouteRule:
    """A URL pattern plus what to do with matching requests."""

    pattern: Union[str, "re.Pattern[str]"]
    action: RouteAction = "abort"
    fulfill_options: dict | None = None

    def matches(self, url: str) -> bool:
        if isinstance(self.pattern, re.Pattern):
            return self.pattern.search(url) is not None
        # fnmatch's "*" already crosses "/" so "**" behaves like Playwright's glob
        return fnmatch.fnmatchcase(url, _escape_glob(self.pattern))


class RequestInterceptor:
    """
    First-match-wins rule table evaluated for every request of a page.

    Attributes:
        rules: Registered rules, in evaluation order.
        intercepted: URLs that matched a rule, in the order they were seen.
    """

    def __init__(self) -> None:
        self.rules: list[RouteRule] = []
        self.intercepted: list[str] = []

    def add_rule(
        self,
        pattern: Union[str, "re.Pattern[str]"],
        action: RouteAction = "abort",
        **fulfill_options: Any,
    ) -> "RequestInterceptor":
        """
        Register a rule after all existing ones.

        Args:
            pattern: Glob string or compiled regex matched against the full URL.
            action: ``"abort"``, ``"continue"``, ``"fulfill"`` or a callable
                that receives the Playwright ``Route``.
            **fulfill_options: Passed to ``route.fulfill`` for ``"fulfill"``.

        Returns:
            Self for method chaining.
        """
        if isinstance(action, str) and action not in ACTIONS:
            raise ValueError(f"Unknown route action {action!r}; expected one of {ACTIONS}")
        self.rules.append(RouteRule(pattern, action, fulfill_options or None))
        return self

    def match(self, url: str) -> RouteRule | None:
        """Return the first rule matching ``url``, or None."""
        for rule in self.rules:
            if rule.matches(url):
                return rule
        return None

    def was_requested(self, pattern: Union[str, "re.Pattern[str]"]) -> bool:
        """Return True if any intercepted URL matches ``pattern``."""
        probe = RouteRule(pattern)
        return any(probe.matches(url) for url in self.intercepted)

    def handle(self, route: Route) -> None:
        """Dispatch one routed request according to the rule table."""
        url = route.request.url
        rule = self.match(url)
        if rule is None:
            route.continue_()
            return

        self.intercepted.append(url)
        logger.info("Intercepted %s -> %s", url, getattr(rule.action, "__name__", rule.action))
        if callable(rule.action):
            try:
                rule.action(route)
            except Exception:
                # An unresolved route stalls the request until the page times out
                route.abort()
                raise
        elif rule.action == "abort":
            route.abort()
        elif rule.action == "fulfill":
            route.fulfill(**(rule.fulfill_options or {}))
        else:
            route.continue_()

    def install(self, page: Page) -> "RequestInterceptor":
        """Route every request of ``page`` through this table."""
        page.route("**/*", self.handle)
        return self
