import re

import pytest

from logzen.level import LogLevel
from logzen.message import Message, format_message, time_string


@pytest.mark.parametrize(
    "elapsed,expected",
    [
        (0, "00:00:00"),
        (0.4, "00:00:00"),
        (0.6, "00:00:01"),
        (61, "00:01:01"),
        (3600 * 2 + 59 * 60 + 59, "02:59:59"),
    ],
)
def test_time_string(elapsed, expected):
    assert time_string(elapsed) == expected


def test_default_format():
    entry = format_message(Message("hello", LogLevel.INFO))
    assert re.fullmatch(r"\(\d\d:\d\d:\d\d\) \[INFO\] hello", entry)


def test_prefix_is_followed_by_slash():
    entry = format_message(Message("hello", LogLevel.INFO, prefix="NET"))
    assert "[NET/INFO] hello" in entry


def test_custom_format_without_prefix():
    entry = format_message(Message("hello", LogLevel.INFO), "($time) [$level] $message")
    assert entry.endswith("[INFO] hello")


def test_unknown_tokens_pass_through():
    entry = format_message(Message("x", LogLevel.LOG), "$host $level $message $levels")
    assert entry == "$host LOG x $levels"


def test_elapsed_time_is_substituted():
    assert format_message(Message("x"), "$time", elapsed=75) == "00:01:15"


def test_origin_is_not_compared():
    assert Message("x", origin=object()) == Message("x")


def test_level_name_is_normalized():
    message = Message("x", "info")
    assert message.level is LogLevel.INFO
    assert format_message(message, "$level $message") == "INFO x"


def test_unknown_level_name_is_rejected():
    with pytest.raises(ValueError):
        Message("x", "loud")
