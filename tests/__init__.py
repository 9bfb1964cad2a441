"""
Test suite for the-internet demo site.

This package contains:
- unit/: Tests of configuration and shared helpers (no browser, no network)
- smoke/: HTTP-level checks using requests
- e2e/: Browser scenarios using Playwright and page objects
"""
