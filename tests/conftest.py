from __future__ import annotations

from datetime import datetime, timezone

import pytest


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 7, 28, 9, 5, 0, tzinfo=timezone.utc)
