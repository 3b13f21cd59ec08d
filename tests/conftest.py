"""Fixtures for the scenario suite: offline transport, clean environment."""

from __future__ import annotations

import pytest

from ai_access.base.diagnostics import DiagnosticsCollector
from ai_access.config.env import ENV_ALIASES, ENV_MAP
from ai_access.testing import FakeTransport


@pytest.fixture(autouse=True)
def clean_provider_env(monkeypatch: pytest.MonkeyPatch) -> None:
    names = set(ENV_MAP.values())
    for aliases in ENV_ALIASES.values():
        names.update(aliases)
    names.update(f"{provider.upper()}_BASE_URL" for provider in ENV_MAP)
    for name in names:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture()
def diagnostics() -> DiagnosticsCollector:
    return DiagnosticsCollector()
