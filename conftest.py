"""
Repository-level pytest configuration.

Responsibilities:
  - Load a local `.env` file (never overriding variables set by the shell or CI)
  - Initialize loguru once per session
  - Expose the repository root to tests

No credentials are embedded here. Defaults for every setting live in
`testsuites/ui_testing/framework/config.py`.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from storefront_tools.common import init_logger
from testsuites.ui_testing.framework.config import load_dotenv_file


def pytest_configure(config):
    load_dotenv_file(Path(__file__).parent / ".env")
    init_logger()


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent
