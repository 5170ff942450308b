import io
import logging

import pytest

from logzen import Logger
from logzen.console import Console
from logzen.endpoints.adapters import (
    ADAPTERS,
    ConsoleAdapter,
    NestedLoggerAdapter,
    SourceAdapter,
    StdlibLoggerAdapter,
    WriterAdapter,
    get_adapter,
    probe_kind,
)
from logzen.endpoints.errors import InvalidEndpointTypeError
from logzen.endpoints.models import EndpointKind
from logzen.level import LogLevel
from logzen.message import Message

from tests.fakes import FailingWriter, FakeSource, RecordingConsole, RecordingWriter


def computed(contents: str, level: LogLevel = LogLevel.LOG) -> Message:
    return Message(contents, level, computed=f"[{level.value}] {contents}")


@pytest.mark.parametrize(
    "target,expected",
    [
        (Logger(attach_global_console=False), EndpointKind.LOGGER),
        (logging.getLogger("logzen.tests"), EndpointKind.STDLIB),
        (io.StringIO(), EndpointKind.WRITER),
        (io.BytesIO(), EndpointKind.WRITER),
        (RecordingWriter(), EndpointKind.WRITER),
        (FakeSource(), EndpointKind.SOURCE),
        (Console(), EndpointKind.CONSOLE),
        (RecordingConsole(), EndpointKind.CONSOLE),
        (object(), None),
        (42, None),
    ],
)
def test_probe_kind(target, expected):
    assert probe_kind(target) is expected


def test_every_kind_has_an_adapter():
    assert set(ADAPTERS) == set(EndpointKind)
    for kind, adapter in ADAPTERS.items():
        assert adapter.kind is kind
        assert adapter.can_send or adapter.can_receive


def test_get_adapter_unknown_kind():
    with pytest.raises(InvalidEndpointTypeError):
        get_adapter("teleprinter")


def test_writer_writes_entry_without_separator():
    sink = io.StringIO()
    assert WriterAdapter().send(sink, computed("hello")) is True
    assert sink.getvalue() == "[LOG] hello"


def test_writer_encodes_for_binary_sinks():
    sink = io.BytesIO()
    assert WriterAdapter().send(sink, computed("héllo")) is True
    assert sink.getvalue() == "[LOG] héllo".encode()


def test_writer_failure_is_reported_not_raised():
    assert WriterAdapter().send(FailingWriter(), computed("x")) is False


def test_writer_cannot_receive():
    with pytest.raises(NotImplementedError):
        WriterAdapter().receive(RecordingWriter(), lambda message: None)


def test_console_calls_level_method():
    console = RecordingConsole()
    assert ConsoleAdapter().send(console, computed("boom", LogLevel.ERROR)) is True
    assert console.calls == [("error", "[ERROR] boom")]


def test_console_skips_missing_method():
    console = RecordingConsole()
    assert ConsoleAdapter().send(console, computed("hmm", LogLevel.WARN)) is True
    assert console.calls == []


def test_console_method_failure_is_reported():
    class Broken:
        def info(self, data):
            raise ValueError("closed")

    assert ConsoleAdapter().send(Broken(), computed("x", LogLevel.INFO)) is False


def test_stdlib_logger_receives_mapped_level(caplog):
    target = logging.getLogger("logzen.tests.stdlib")
    with caplog.at_level(logging.DEBUG, logger="logzen.tests.stdlib"):
        assert StdlibLoggerAdapter().send(target, computed("careful", LogLevel.WARN))

    assert [(r.levelno, r.getMessage()) for r in caplog.records] == [
        (logging.WARNING, "[WARN] careful")
    ]


def test_source_trims_chunks_and_uses_log_level():
    source = FakeSource()
    received = []
    unsubscribe = SourceAdapter().receive(source, received.append)

    source.push("  hello world \n")
    source.push(b"bytes\r\n")
    unsubscribe()
    source.push("ignored")

    assert [(m.contents, m.level, m.computed) for m in received] == [
        ("hello world", LogLevel.LOG, None),
        ("bytes", LogLevel.LOG, None),
    ]


def test_source_with_unsubscribe_method():
    class Source:
        def __init__(self):
            self.callbacks = []

        def subscribe(self, callback):
            self.callbacks.append(callback)

        def unsubscribe(self, callback):
            self.callbacks.remove(callback)

    source = Source()
    unsubscribe = SourceAdapter().receive(source, lambda message: None)
    assert len(source.callbacks) == 1
    unsubscribe()
    assert source.callbacks == []


def test_source_cannot_send():
    assert SourceAdapter().send(FakeSource(), computed("x")) is False


def test_nested_logger_send_reuses_computed_entry():
    target = Logger(attach_global_console=False, format="$level: $message")
    assert NestedLoggerAdapter().send(target, computed("hi", LogLevel.INFO))
    assert target.entries == ["[INFO] hi"]


def test_nested_logger_send_reformats_with_endpoint_prefix():
    target = Logger(attach_global_console=False, format="$prefix$level: $message")
    message = Message("hi", LogLevel.INFO, prefix="NET", computed="[INFO] hi")
    assert NestedLoggerAdapter().send(target, message)
    assert target.entries == ["NET/INFO: hi"]


def test_nested_logger_receive_listens_to_entries():
    target = Logger(attach_global_console=False)
    received = []
    unsubscribe = NestedLoggerAdapter().receive(target, received.append)

    target.info("ping")
    unsubscribe()
    target.info("pong")

    assert len(received) == 1
    assert received[0].level is LogLevel.INFO
    assert received[0].computed == received[0].contents == target.entries[0]
