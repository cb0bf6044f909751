"""
================================================================================
Runtime Configuration
================================================================================

Environment-driven settings for the storefront UI suite.

Features:
    - Per-field environment variable override with fixed defaults
    - Tolerant parsing (booleans, integers, floats never raise)
    - Immutable result, safe to share across page objects
    - Optional `.env` loading for local runs

Environment Variable Mapping:
    - base_url              -> BASE_URL
    - test_user.email       -> TEST_USER_EMAIL
    - test_user.password    -> TEST_USER_PASSWORD
    - test_user.first_name  -> TEST_FIRST_NAME
    - test_user.last_name   -> TEST_LAST_NAME
    - test_user.gender      -> TEST_GENDER
    - test_user.newsletter  -> TEST_NEWSLETTER ("false" disables)
    - test_user.company     -> TEST_COMPANY
    - browser.headless      -> HEADLESS ("false" disables)
    - browser.timeout       -> TIMEOUT (ms)
    - browser.probe_timeout -> PROBE_TIMEOUT (ms)
    - browser.name          -> BROWSER
    - price_slider_max      -> PRICE_SLIDER_MAX
    - ci                    -> CI

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv
from loguru import logger


DEFAULT_BASE_URL = "https://demo.nopcommerce.com"
SUPPORTED_BROWSERS = ("chromium", "firefox", "webkit")


@dataclass(frozen=True)
class TestUser:
    """Credentials and profile used by the `*_with_test_user` helpers."""

    __test__ = False

    email: str = "test@example.com"
    password: str = "Test123!"
    first_name: str = "Test"
    last_name: str = "User"
    gender: str = "Male"
    newsletter: bool = True
    company: str = "Test Company"


@dataclass(frozen=True)
class BrowserSettings:
    """Browser launch and wait settings. Timeouts are in milliseconds."""

    headless: bool = True
    timeout: int = 60000
    probe_timeout: int = 5000
    name: str = "chromium"


@dataclass(frozen=True)
class RuntimeConfig:
    """
    Fully populated runtime configuration.

    Built by `get_config()`. Every field always holds a value: either the
    environment override or the default.
    """

    base_url: str = DEFAULT_BASE_URL
    test_user: TestUser = field(default_factory=TestUser)
    browser: BrowserSettings = field(default_factory=BrowserSettings)
    price_slider_max: float = 1000.0
    ci: bool = False

    @property
    def retries(self) -> int:
        """Scenario retry count: retries are only enabled on CI."""
        return 2 if self.ci else 0

    @property
    def workers(self) -> int:
        """Parallel worker count for xdist."""
        return 3 if self.ci else 5


# =============================================================================
# Parsing Helpers
# =============================================================================

def _env_str(env: Mapping[str, str], key: str, default: str) -> str:
    value = env.get(key)
    return value if value else default


def _env_flag(env: Mapping[str, str], key: str, default: bool) -> bool:
    # Only the literal "false" flips a default; anything else keeps it.
    if env.get(key) == "false":
        return False
    return default


def _env_int(env: Mapping[str, str], key: str, default: int) -> int:
    value = env.get(key)
    if not value:
        return default
    try:
        return int(value.strip())
    except ValueError:
        logger.warning(f"Ignoring non-integer {key}={value!r}, using {default}")
        return default


def _env_positive_float(env: Mapping[str, str], key: str, default: float) -> float:
    value = env.get(key)
    if not value:
        return default
    try:
        parsed = float(value.strip())
    except ValueError:
        logger.warning(f"Ignoring non-numeric {key}={value!r}, using {default}")
        return default
    return parsed if parsed > 0 else default


def _env_browser(env: Mapping[str, str], key: str, default: str) -> str:
    value = (env.get(key) or "").strip().lower()
    return value if value in SUPPORTED_BROWSERS else default


# =============================================================================
# Public API
# =============================================================================

def get_config(environ: Optional[Mapping[str, str]] = None) -> RuntimeConfig:
    """
    Build a `RuntimeConfig` from environment variables.

    Each field falls back to its default independently. The function has no
    side effects and never raises; calling it twice against an unchanged
    environment yields equal results.

    Args:
        environ: Mapping to read from. Defaults to `os.environ`.

    Returns:
        Fully populated, immutable configuration
    """
    env = os.environ if environ is None else environ
    user_defaults = TestUser()
    browser_defaults = BrowserSettings()

    return RuntimeConfig(
        base_url=_env_str(env, "BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
        test_user=TestUser(
            email=_env_str(env, "TEST_USER_EMAIL", user_defaults.email),
            password=_env_str(env, "TEST_USER_PASSWORD", user_defaults.password),
            first_name=_env_str(env, "TEST_FIRST_NAME", user_defaults.first_name),
            last_name=_env_str(env, "TEST_LAST_NAME", user_defaults.last_name),
            gender=_env_str(env, "TEST_GENDER", user_defaults.gender),
            newsletter=_env_flag(env, "TEST_NEWSLETTER", user_defaults.newsletter),
            company=_env_str(env, "TEST_COMPANY", user_defaults.company),
        ),
        browser=BrowserSettings(
            headless=_env_flag(env, "HEADLESS", browser_defaults.headless),
            timeout=_env_int(env, "TIMEOUT", browser_defaults.timeout),
            probe_timeout=_env_int(env, "PROBE_TIMEOUT", browser_defaults.probe_timeout),
            name=_env_browser(env, "BROWSER", browser_defaults.name),
        ),
        price_slider_max=_env_positive_float(env, "PRICE_SLIDER_MAX", 1000.0),
        ci=bool(env.get("CI")),
    )


def load_dotenv_file(path: Optional[Path] = None) -> bool:
    """
    Load a `.env` file into the process environment.

    Existing environment variables are never overridden.

    Args:
        path: Path to the `.env` file. Defaults to the repository root.

    Returns:
        True if a file was found and loaded
    """
    env_path = path or Path(__file__).resolve().parents[3] / ".env"
    if not env_path.exists():
        return False
    load_dotenv(env_path, override=False)
    logger.debug(f"Loaded environment overrides from: {env_path}")
    return True


__all__ = [
    "BrowserSettings",
    "RuntimeConfig",
    "TestUser",
    "get_config",
    "load_dotenv_file",
]
