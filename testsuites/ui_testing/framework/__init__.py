"""
================================================================================
UI Testing Framework
================================================================================

Playwright-based UI automation framework for the nopCommerce storefront.

Components:
    - config: Environment-driven runtime configuration
    - locators: Shared selectors and expected UI copy
    - extractors: Pure text parsing (counts, prices, slugs)
    - page_base: Base page object for common operations
    - browser_manager: Browser lifecycle management

Author: Automation Team
License: MIT
================================================================================
"""

from .config import RuntimeConfig, get_config
from .page_base import BasePage, DialogCapture, ElementNotFoundError
from .browser_manager import BrowserManager

__all__ = [
    "BasePage",
    "BrowserManager",
    "DialogCapture",
    "ElementNotFoundError",
    "RuntimeConfig",
    "get_config",
]
