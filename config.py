"""
Suite configuration module.

This module defines configuration classes for the environments the
suite can run against (the public demo site or a local container).
Configuration values are loaded from environment variables with
sensible defaults.
"""

import os
from pathlib import Path

# Base directory of the project
BASE_DIR = Path(__file__).resolve().parent


class Config:
    """Base configuration with default settings."""

    BASE_URL: str = os.environ.get(
        "THE_INTERNET_BASE_URL", "https://the-internet.herokuapp.com"
    )

    # Credentials accepted by the /basic_auth page
    BASIC_AUTH_USERNAME: str = os.environ.get("BASIC_AUTH_USERNAME", "admin")
    BASIC_AUTH_PASSWORD: str = os.environ.get("BASIC_AUTH_PASSWORD", "admin")

    # Playwright timeouts are in milliseconds
    ACTION_TIMEOUT_MS: int = int(os.environ.get("E2E_ACTION_TIMEOUT_MS", "10000"))
    NAVIGATION_TIMEOUT_MS: int = int(os.environ.get("E2E_NAVIGATION_TIMEOUT_MS", "30000"))
    ASSERTION_TIMEOUT_MS: int = int(os.environ.get("E2E_ASSERTION_TIMEOUT_MS", "5000"))

    # HTTP-level timeouts (requests) are in seconds
    SITE_READY_TIMEOUT_S: int = int(os.environ.get("E2E_SITE_READY_TIMEOUT", "60"))
    HTTP_TIMEOUT_S: int = int(os.environ.get("E2E_HTTP_TIMEOUT", "10"))

    SCREENSHOT_DIR: str = os.environ.get(
        "E2E_SCREENSHOT_DIR", str(BASE_DIR / "test-results" / "screenshots")
    )


class PublicConfig(Config):
    """Run against the hosted demo site."""


class LocalConfig(Config):
    """Run against a locally started the-internet container."""

    BASE_URL: str = os.environ.get("THE_INTERNET_BASE_URL", "http://localhost:7080")

    SITE_READY_TIMEOUT_S: int = int(os.environ.get("E2E_SITE_READY_TIMEOUT", "15"))


# Configuration mapping for easy access
config = {
    "public": PublicConfig,
    "local": LocalConfig,
    "default": PublicConfig,
}


def get_config(env: str | None = None) -> type[Config]:
    """
    Get the configuration class for the specified environment.

    Args:
        env: Environment name (public, local).
             If None, uses E2E_ENV environment variable.

    Returns:
        Configuration class for the specified environment.
    """
    if env is None:
        env = os.environ.get("E2E_ENV", "public")
    return config.get(env, config["default"])
