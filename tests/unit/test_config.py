import pytest
from pydantic import ValidationError

from logzen.config import DEFAULT_FORMAT, LoggerSettings
from logzen.level import LogLevel


def test_defaults():
    settings = LoggerSettings.load()
    assert settings.attach_global_console is True
    assert settings.retain_logs is True
    assert settings.allow_clearing is True
    assert settings.format == DEFAULT_FORMAT == "($time) [$prefix$level] $message"
    assert settings.prefix is None
    assert settings.default_level is LogLevel.LOG


@pytest.mark.parametrize(
    "env,field,expected",
    [
        ({"RETAIN_LOGS": "false"}, "retain_logs", False),
        ({"ALLOW_CLEARING": "0"}, "allow_clearing", False),
        ({"ATTACH_GLOBAL_CONSOLE": "false"}, "attach_global_console", False),
        ({"FORMAT": "[$level] $message"}, "format", "[$level] $message"),
        ({"PREFIX": "NET"}, "prefix", "NET"),
        ({"DEFAULT_LEVEL": "info"}, "default_level", LogLevel.INFO),
    ],
)
def test_settings_from_env(monkeypatch, env, field, expected):
    for key, value in env.items():
        monkeypatch.setenv(f"LOGZEN_{key}", value)
    settings = LoggerSettings.load()
    assert getattr(settings, field) == expected


def test_overrides_take_precedence_over_env(monkeypatch):
    monkeypatch.setenv("LOGZEN_PREFIX", "ENV")
    settings = LoggerSettings.load(prefix="ARG")
    assert settings.prefix == "ARG"


def test_empty_prefix_is_none():
    assert LoggerSettings(prefix="").prefix is None


def test_invalid_level():
    with pytest.raises(ValidationError):
        LoggerSettings(default_level="verbose")


def test_invalid_bool():
    with pytest.raises(ValidationError):
        LoggerSettings.model_validate({"retain_logs": "notabool"})
