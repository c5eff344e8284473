"""
Repository-level pytest configuration.

Responsibilities:
  - Register the UI command-line options (`--ui-browser`, `--headed`,
    `--base-url`); pytest only honours `pytest_addoption` in rootdir conftests
  - Initialize loguru once per session from `logging.*` configuration
  - Write Allure `environment.properties` when results are collected
"""

from __future__ import annotations

import platform
from pathlib import Path

import pytest

from autotest_tools.common.global_config import init_logger
from autotest_tools.report_tools.allure_utils import write_environment_properties
from testsuites.ui_testing.framework.browser_manager import SUPPORTED_BROWSERS
from testsuites.ui_testing.framework.page_base import resolve_base_url


def pytest_addoption(parser):
    group = parser.getgroup("ui", "Automation Exercise UI suite")
    group.addoption(
        "--ui-browser",
        action="store",
        default="chromium",
        choices=SUPPORTED_BROWSERS,
        help="Browser engine for UI tests (default: chromium)",
    )
    group.addoption(
        "--headed",
        action="store_true",
        default=False,
        help="Run the browser with a visible window",
    )
    group.addoption(
        "--base-url",
        action="store",
        default=None,
        help="Shop URL (default: UI_BASE_URL / BASE_URL env or ui.base_url in config.yaml)",
    )


def pytest_configure(config):
    init_logger()


def pytest_sessionfinish(session, exitstatus):
    """Describe the run in Allure's Environment widget."""
    results_dir = session.config.getoption("allure_report_dir", default=None)
    if not results_dir:
        return

    write_environment_properties(
        Path(results_dir),
        {
            "Base URL": session.config.getoption("base_url") or resolve_base_url(),
            "Browser": session.config.getoption("ui_browser"),
            "Headless": not session.config.getoption("headed"),
            "Python": platform.python_version(),
            "Platform": platform.platform(),
        },
    )


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent
