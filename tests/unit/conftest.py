"""Fixtures shared by unit tests."""

from __future__ import annotations

import pytest

from wechat_oauth import telemetry


@pytest.fixture(autouse=True)
def reset_telemetry(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clients configure module-level telemetry; undo it after each test."""
    monkeypatch.setattr(telemetry, "_tracer", None)
    monkeypatch.setattr(telemetry, "_logger", None)
