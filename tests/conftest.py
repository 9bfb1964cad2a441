"""
Shared pytest configuration for the-internet test suite.

Sets up logging once for every suite and records each case's final
outcome (passed, failed or skipped) so a run's log reads as a sequence
of scenario verdicts.
"""

import logging

import pytest

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Log the outcome of each case once it is final."""
    outcome = yield
    report = outcome.get_result()

    if report.when == "call" or (report.when == "setup" and not report.passed):
        verdict = "xfailed" if hasattr(report, "wasxfail") else report.outcome
        logger.info("%s: %s", item.nodeid, verdict)
