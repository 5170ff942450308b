"""Top-level pytest configuration for logzen."""

from __future__ import annotations

import pytest

from logzen import Logger
from logzen.config import LoggerSettings
from tests.fakes import FakeSource, RecordingConsole, RecordingWriter


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    # Clear LOGZEN_* variables so settings come from defaults
    for field in LoggerSettings.model_fields:
        monkeypatch.delenv(f"LOGZEN_{field.upper()}", raising=False)


@pytest.fixture
def logger() -> Logger:
    return Logger(attach_global_console=False, retain_logs=True)


@pytest.fixture
def writer() -> RecordingWriter:
    return RecordingWriter()


@pytest.fixture
def console() -> RecordingConsole:
    return RecordingConsole()


@pytest.fixture
def source() -> FakeSource:
    return FakeSource()
