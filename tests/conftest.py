from __future__ import annotations

from datetime import UTC, datetime

import pytest

from ong_lifecycle.config.settings import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("WEBHOOK_DUPLICATE_POLICY", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def fixed_now() -> datetime:
    return datetime(2026, 3, 1, 12, 0, tzinfo=UTC)
