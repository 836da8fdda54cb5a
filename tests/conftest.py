from __future__ import annotations

import pytest

from spanned.config import ENV_EXTENDED_SPAN_JOINING, reset_settings


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv(ENV_EXTENDED_SPAN_JOINING, raising=False)
    reset_settings()
    yield
    reset_settings()
