"""Pytest configuration for the ai_access unit test suite.

Every test runs offline: clients are built on :class:`FakeTransport` and the
provider credential/base URL environment variables are cleared so the
developer's shell cannot leak into assertions.
"""

from __future__ import annotations

import logging
from typing import Iterator, List

import pytest

from ai_access.base.diagnostics import DiagnosticsCollector
from ai_access.base.logging import ROOT_LOGGER_NAME, get_logger
from ai_access.config.env import ENV_ALIASES, ENV_MAP
from ai_access.testing import FakeTransport


class ListHandler(logging.Handler):
    """Capture formatted log messages into a list."""

    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.messages: List[str] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.messages.append(record.getMessage())


@pytest.fixture(autouse=True)
def clean_provider_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove provider key/base URL variables for the duration of a test."""
    names = set(ENV_MAP.values())
    for aliases in ENV_ALIASES.values():
        names.update(aliases)
    for provider in ENV_MAP:
        names.add(f"{provider.upper()}_BASE_URL")
    for name in names:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture()
def diagnostics() -> DiagnosticsCollector:
    return DiagnosticsCollector()


@pytest.fixture()
def log_records(monkeypatch: pytest.MonkeyPatch) -> Iterator[ListHandler]:
    """Capture every ``ai_access`` log message at DEBUG level."""
    monkeypatch.setenv("AI_ACCESS_LOG_LEVEL", "DEBUG")
    root = get_logger(ROOT_LOGGER_NAME)
    handler = ListHandler()
    root.addHandler(handler)
    try:
        yield handler
    finally:
        root.removeHandler(handler)
