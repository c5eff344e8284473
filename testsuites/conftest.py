"""
================================================================================
Root Pytest Configuration
================================================================================

This module registers the project-wide markers and tags collected tests
by directory (ui_testing -> ui, unit -> unit).

================================================================================
"""

from pathlib import Path

import pytest

from autotest_tools.common.config_loader import ConfigLoader


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
        "markers", "e2e: End-to-end tests simulating user journeys"
    )

    # Domain markers
    config.addinivalue_line(
        "markers", "ui: Browser tests against the live shop"
    )
    config.addinivalue_line(
        "markers", "unit: Offline framework tests (no browser, no network)"
    )

    # Feature markers
    config.addinivalue_line(
        "markers", "home: Tests related to the home page"
    )
    config.addinivalue_line(
        "markers", "auth: Tests related to login, signup and accounts"
    )
    config.addinivalue_line(
        "markers", "products: Tests related to product listing and details"
    )
    config.addinivalue_line(
        "markers", "cart: Tests related to cart and checkout"
    )


def pytest_collection_modifyitems(config, items):
    """
    Auto-add domain markers based on test location.

    UI tests also get the configured per-test timeout (`ui.timeouts.test`,
    milliseconds) unless they carry their own `timeout` marker.
    """
    ui_timeout = ConfigLoader().get("ui.timeouts.test", 45000) / 1000

    for item in items:
        parts = Path(str(item.path)).parts

        if "ui_testing" in parts:
            item.add_marker(pytest.mark.ui)
            if item.get_closest_marker("timeout") is None:
                item.add_marker(pytest.mark.timeout(ui_timeout))

        if "unit" in parts:
            item.add_marker(pytest.mark.unit)


def pytest_report_header(config):
    """Add custom header to pytest output."""
    return [
        "",
        "=" * 60,
        "Automation Exercise E2E Test Suite",
        "=" * 60,
        "",
    ]

