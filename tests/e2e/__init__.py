"""
Browser test package for the-internet.

This package contains Playwright-based browser tests and demonstrates:
- Page Object Model (POM) pattern
- Locator strategies by role, CSS and text
- Request interception and per-context credentials
"""
