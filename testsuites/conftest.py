"""
================================================================================
Root Pytest Configuration
================================================================================

This module provides the root pytest configuration for the test suites.
It registers the project markers and tags collected items by location.

================================================================================
"""

import pytest

from testsuites.ui_testing.framework.config import get_config


def pytest_configure(config):
    """Configure pytest with project-wide custom markers."""

    # Priority markers
    config.addinivalue_line(
        "markers", "P0: Critical priority tests - must pass for deployment"
    )
    config.addinivalue_line(
        "markers", "P1: High priority tests - important functionality"
    )
    config.addinivalue_line(
        "markers", "P2: Medium priority tests - edge cases and minor features"
    )
    config.addinivalue_line(
        "markers", "P3: Low priority tests - extensive validation"
    )

    # Test type markers
    config.addinivalue_line(
        "markers", "smoke: Quick verification tests"
    )
    config.addinivalue_line(
        "markers", "regression: Full regression test suite"
    )
    config.addinivalue_line(
        "markers", "smoke_ui: Storefront smoke scenarios"
    )
    config.addinivalue_line(
        "markers", "regression_ui: Storefront regression scenarios"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests simulating user flows"
    )

    # Domain markers
    config.addinivalue_line(
        "markers", "ui: Browser-driven storefront tests"
    )
    config.addinivalue_line(
        "markers", "unit: Browser-free tests of the framework"
    )

    # Feature markers
    config.addinivalue_line(
        "markers", "auth: Tests related to customer login"
    )
    config.addinivalue_line(
        "markers", "registration: Tests related to customer registration"
    )
    config.addinivalue_line(
        "markers", "password_recovery: Tests related to password recovery"
    )
    config.addinivalue_line(
        "markers", "search: Tests related to product search"
    )
    config.addinivalue_line(
        "markers", "filtering: Tests related to catalog filtering and sorting"
    )


def pytest_collection_modifyitems(config, items):
    """
    Modify collected test items.

    Tests under ui_testing are tagged `ui` and `e2e`, tests under unit
    are tagged `unit`.
    """
    for item in items:
        path = str(item.fspath)
        if "ui_testing" in path:
            item.add_marker(pytest.mark.ui)
            item.add_marker(pytest.mark.e2e)
        elif "unit" in path:
            item.add_marker(pytest.mark.unit)


def pytest_report_header(config):
    """Add custom header to pytest output."""
    runtime = get_config()
    return [
        "",
        "=" * 60,
        "nopCommerce Storefront E2E Test Framework",
        f"Base URL: {runtime.base_url}",
        f"Browser:  {runtime.browser.name} (headless={runtime.browser.headless})",
        "=" * 60,
        "",
    ]
