"""
================================================================================
Storefront Tools
================================================================================

Support utilities for the storefront automation suite.

Modules:
    - common: Logging setup shared by the suite and the runner
    - report_tools: Allure attachments and report generation

Example:
    from storefront_tools.common import init_logger
    from storefront_tools.report_tools.allure_utils import generate_allure_report

    init_logger()
    generate_allure_report("reports/allure-results")

================================================================================
"""

__version__ = "1.0.0"

__all__ = [
    "common",
    "report_tools",
]
