"""
================================================================================
Autotest Tools
================================================================================

Infrastructure shared by the test runner and the pytest suites.

Modules:
    - common: Loguru setup driven by the suite configuration
    - report_tools: Allure attachments, environment.properties and run summaries

Example:
    from autotest_tools.common import init_logger
    from autotest_tools.report_tools.allure_utils import AllureReportProcessor

    init_logger()
    AllureReportProcessor("reports/allure-results").log_summary()

================================================================================
"""

__version__ = "1.0.0"

__all__ = [
    "common",
    "report_tools",
]
