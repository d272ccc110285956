"""Shared pytest configuration.

The database URL must be set before ``homecare.infrastructure.database`` is
imported by any test module, so it lives here rather than in a fixture.
"""

from __future__ import annotations

import os
import sys
import tempfile
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

TEST_DB_PATH = Path(tempfile.gettempdir()) / "homecare_notifications_test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["APP_TIMEZONE"] = "UTC"

from homecare.config import get_settings  # noqa: E402

get_settings.cache_clear()


@pytest.fixture
def anyio_backend() -> str:
    """Run async tests on asyncio; the controller schedules asyncio tasks."""

    return "asyncio"
