# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: logzen
"""
Capability adapters.

Each adapter translates the generic ``send``/``receive`` operations into the
idiom of one kind of attachable object. ``send`` never raises: failures are
logged and reported as ``False``. ``receive`` subscribes to the object's data
notifications and returns a callable cancelling the subscription.
"""

from __future__ import annotations

import asyncio
import io
import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, ClassVar, Final

from logzen.endpoints.errors import EndpointError, InvalidEndpointTypeError
from logzen.endpoints.models import EndpointKind
from logzen.level import LogLevel
from logzen.message import Message

if TYPE_CHECKING:
    from logzen.endpoints.protocols import SourceProtocol, WriterProtocol

logger = logging.getLogger(__name__)

InboundHandler = Callable[[Message], None]
Unsubscribe = Callable[[], None]
Probe = Callable[[Any], "EndpointKind | None"]

_CONSOLE_METHODS: Final = tuple(level.method_name for level in LogLevel)


def _decode(chunk: str | bytes | bytearray) -> str:
    if isinstance(chunk, (bytes, bytearray)):
        return bytes(chunk).decode("utf-8", errors="replace")
    return str(chunk)


def _entry(message: Message) -> str:
    return message.computed if message.computed is not None else message.contents


class CapabilityAdapter:
    """Base class for capability adapters."""

    kind: ClassVar[EndpointKind]
    can_send: ClassVar[bool] = False
    can_receive: ClassVar[bool] = False

    def send(self, target: Any, message: Message) -> bool:
        """Push a message into the target.

        Returns:
            Whether the target accepted the message
        """
        if not self.can_send:
            return False
        try:
            self._send(target, message)
        except Exception as e:
            logger.debug(
                "%s endpoint %r rejected message: %s",
                self.kind.value,
                target,
                e,
                exc_info=True,
            )
            return False
        return True

    def _send(self, target: Any, message: Message) -> None:
        raise NotImplementedError

    def receive(self, target: Any, handler: InboundHandler) -> Unsubscribe:
        """Subscribe to inbound data from the target."""
        raise NotImplementedError(f"{self.kind.value} endpoints cannot receive")


class NestedLoggerAdapter(CapabilityAdapter):
    """Forwards to, and listens to, another logzen Logger."""

    kind = EndpointKind.LOGGER
    can_send = True
    can_receive = True

    def _send(self, target: Any, message: Message) -> None:
        if message.prefix:
            # the endpoint carries its own prefix, so the target reformats
            target.send(Message(message.contents, message.level, message.prefix))
        else:
            target.send(
                Message(
                    message.contents,
                    message.level,
                    computed=_entry(message),
                )
            )

    def receive(self, target: Any, handler: InboundHandler) -> Unsubscribe:
        def on_entry(entry: str, level: LogLevel) -> None:
            handler(Message(entry, level, computed=entry))

        return target.on("entry", on_entry)


class StdlibLoggerAdapter(CapabilityAdapter):
    """Writes entries to a standard library ``logging.Logger``."""

    kind = EndpointKind.STDLIB
    can_send = True

    def _send(self, target: Any, message: Message) -> None:
        target.log(message.level.to_stdlib_level(), _entry(message))


class ConsoleAdapter(CapabilityAdapter):
    """Calls the console method named after the message level."""

    kind = EndpointKind.CONSOLE
    can_send = True

    def _send(self, target: Any, message: Message) -> None:
        method = getattr(target, message.level.method_name, None)
        if callable(method):
            method(_entry(message))


class WriterAdapter(CapabilityAdapter):
    """Writes entries to a text or binary file-like object as-is."""

    kind = EndpointKind.WRITER
    can_send = True

    def _send(self, target: WriterProtocol, message: Message) -> None:
        entry = _entry(message)
        if isinstance(target, (io.RawIOBase, io.BufferedIOBase)):
            target.write(entry.encode("utf-8"))
        else:
            target.write(entry)


class StreamWriterAdapter(CapabilityAdapter):
    """Writes entries to an ``asyncio.StreamWriter`` without draining."""

    kind = EndpointKind.STREAM_WRITER
    can_send = True

    def _send(self, target: Any, message: Message) -> None:
        if target.is_closing():
            raise ConnectionError("stream writer is closing")
        target.write(_entry(message).encode("utf-8"))


class SourceAdapter(CapabilityAdapter):
    """Listens to an event-style source exposing ``subscribe(callback)``."""

    kind = EndpointKind.SOURCE
    can_receive = True

    def receive(self, target: SourceProtocol, handler: InboundHandler) -> Unsubscribe:
        def on_data(chunk: str | bytes) -> None:
            handler(Message(_decode(chunk).strip(), LogLevel.LOG))

        cancel = target.subscribe(on_data)
        if callable(cancel):
            return cancel
        unsubscribe = getattr(target, "unsubscribe", None)
        if callable(unsubscribe):
            return lambda: unsubscribe(on_data)
        return lambda: None


class StreamReaderAdapter(CapabilityAdapter):
    """Reads lines from an ``asyncio.StreamReader`` on the running loop."""

    kind = EndpointKind.STREAM_READER
    can_receive = True

    def receive(self, target: Any, handler: InboundHandler) -> Unsubscribe:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError as e:
            raise EndpointError(
                "Stream reader endpoints require a running event loop",
                target_type=type(target).__name__,
            ) from e
        task = loop.create_task(self._pump(target, handler))
        task.add_done_callback(_report_pump_result)
        return task.cancel

    async def _pump(self, target: asyncio.StreamReader, handler: InboundHandler) -> None:
        while True:
            try:
                line = await target.readline()
            except ValueError as e:
                if target.exception() is not None:
                    logger.error("Error reading inbound stream: %s", e, exc_info=True)
                    return
                # readline has already dropped the oversized line
                logger.warning("Skipped inbound line over the reader limit: %s", e)
                continue
            except Exception as e:
                logger.error("Error reading inbound stream: %s", e, exc_info=True)
                return
            if not line:
                return
            try:
                handler(Message(_decode(line).strip(), LogLevel.LOG))
            except Exception as e:
                logger.error("Error dispatching inbound line: %s", e, exc_info=True)


def _report_pump_result(task: asyncio.Task[None]) -> None:
    if task.cancelled():
        return
    error = task.exception()
    if error is not None:
        logger.error("Stream reader task failed: %s", error, exc_info=error)


ADAPTERS: Final[dict[EndpointKind, CapabilityAdapter]] = {
    adapter.kind: adapter
    for adapter in (
        NestedLoggerAdapter(),
        StdlibLoggerAdapter(),
        ConsoleAdapter(),
        WriterAdapter(),
        StreamWriterAdapter(),
        SourceAdapter(),
        StreamReaderAdapter(),
    )
}


def get_adapter(kind: Any) -> CapabilityAdapter:
    """Look up the adapter for an endpoint kind.

    Raises:
        InvalidEndpointTypeError: If the kind has no adapter
    """
    try:
        return ADAPTERS[kind]
    except (KeyError, TypeError):
        raise InvalidEndpointTypeError(kind) from None


def probe_kind(target: Any) -> EndpointKind | None:
    """Infer the endpoint kind of an object from its type and capabilities.

    Returns:
        The matching kind, or None when nothing matches
    """
    from logzen.logger import Logger

    if isinstance(target, Logger):
        return EndpointKind.LOGGER
    if isinstance(target, (logging.Logger, logging.LoggerAdapter)):
        return EndpointKind.STDLIB
    if isinstance(target, asyncio.StreamReader):
        return EndpointKind.STREAM_READER
    if isinstance(target, asyncio.StreamWriter):
        return EndpointKind.STREAM_WRITER
    if callable(getattr(target, "write", None)):
        return EndpointKind.WRITER
    if callable(getattr(target, "subscribe", None)):
        return EndpointKind.SOURCE
    if any(callable(getattr(target, name, None)) for name in _CONSOLE_METHODS):
        return EndpointKind.CONSOLE
    return None
