"""
================================================================================
Test Data
================================================================================

Static tables and generators used by the storefront scenarios.

Author: Automation Team
License: MIT
================================================================================
"""

from .datasets import *  # noqa: F401,F403
from .datasets import __all__  # noqa: F401
