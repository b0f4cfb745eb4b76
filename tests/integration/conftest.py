"""Integration-test fixtures for deterministic CLI configuration."""

from __future__ import annotations

import os

import pytest


@pytest.fixture(autouse=True)
def _isolate_webtext_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop ambient `WEBTEXT_*` variables so commands start from library defaults."""

    for key in list(os.environ):
        if key.startswith("WEBTEXT_"):
            monkeypatch.delenv(key)
