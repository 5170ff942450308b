# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: logzen
"""
Logger implementation for logzen.

A Logger formats messages, optionally retains the formatted entries, and fans
them out to its attached endpoints. Loggers can be attached to each other to
build forwarding chains.
"""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import replace
from typing import TYPE_CHECKING, Any

from logzen.config import LoggerSettings
from logzen.console import Console
from logzen.endpoints.adapters import Probe, get_adapter, probe_kind
from logzen.endpoints.errors import EndpointCycleError
from logzen.endpoints.models import Endpoint, EndpointKind
from logzen.endpoints.registry import EndpointRegistry, Levels
from logzen.events import EventEmitter
from logzen.level import LogLevel
from logzen.message import Message, format_message

if TYPE_CHECKING:
    from logzen.endpoints.protocols import ConsoleProtocol

logger = logging.getLogger(__name__)


class Logger(EventEmitter):
    """In-process logger with attachable input/output endpoints.

    Events:
        entry: ``(entry, level)`` for every dispatched message
        send: ``(message)`` for every dispatched message
        log, info, warn, error, debug: ``(contents)`` from the shortcut methods

    Attaching loggers to each other in a loop through their output channels is
    refused with EndpointCycleError.
    """

    def __init__(
        self,
        settings: LoggerSettings | None = None,
        *,
        console: ConsoleProtocol | Any | None = None,
        probe: Probe = probe_kind,
        **options: Any,
    ) -> None:
        """
        Initialize a new logger.

        Args:
            settings: Logger settings (loads from environment if None)
            console: Console attached at construction when
                ``attach_global_console`` is set (a new Console if None)
            probe: Capability probe used to infer endpoint kinds
            **options: Settings fields overriding ``settings``

        Raises:
            TypeError: If an option is not a LoggerSettings field
        """
        super().__init__()
        unknown = sorted(set(options) - set(LoggerSettings.model_fields))
        if unknown:
            raise TypeError(f"Unknown logger options: {', '.join(unknown)}")
        if settings is None:
            settings = LoggerSettings.load(**options)
        elif options:
            settings = LoggerSettings.model_validate(
                {**settings.model_dump(), **options}
            )
        self._settings = settings
        self._started = time.monotonic()
        self._entries: list[str] = []
        self._entries_lock = threading.RLock()
        self._dispatch = threading.local()
        self._endpoints = EndpointRegistry(probe=probe, on_inbound=self._receive)

        if self._settings.attach_global_console:
            self.attach(console if console is not None else Console())

    def __repr__(self) -> str:
        return f"<{type(self).__name__} endpoints={self.attached_count} entries={len(self._entries)}>"

    def __str__(self) -> str:
        """The retained entries, one per line."""
        return "\n".join(self.entries)

    @property
    def settings(self) -> LoggerSettings:
        return self._settings

    @property
    def entries(self) -> list[str]:
        """A copy of the retained entries. Empty if retain_logs is off."""
        with self._entries_lock:
            return list(self._entries)

    @property
    def attached_count(self) -> int:
        """Number of attached endpoints."""
        return len(self._endpoints)

    @property
    def endpoints(self) -> tuple[Endpoint, ...]:
        """Snapshot of the attached endpoint records."""
        return tuple(self._endpoints)

    def attach(
        self,
        target: Any,
        input_levels: Levels = None,
        output_levels: Levels = None,
        prefix: str | None = None,
        *,
        kind: EndpointKind | None = None,
    ) -> Endpoint:
        """Attach an input and/or output.

        Attaching an already attached object adds the levels to its record.

        Args:
            target: Object to attach, or a prebuilt Endpoint record
            input_levels: Levels accepted from the object (all when omitted)
            output_levels: Levels sent to the object (input_levels when omitted)
            prefix: Prefix used when messages are reformatted for this endpoint
            kind: Explicit endpoint kind, bypassing the capability probe

        Returns:
            The endpoint record

        Raises:
            UnsupportedEndpointTypeError: If the object cannot be attached
            EndpointCycleError: If attaching a logger would create a cycle
        """
        kind = self._endpoints.resolve_kind(target, kind)
        if kind is EndpointKind.LOGGER:
            other = target.target if isinstance(target, Endpoint) else target
            if other is self or (
                isinstance(other, Logger) and other._forwards_to(self)
            ):
                raise EndpointCycleError(
                    context={"logger": repr(self), "target": repr(other)}
                )
        return self._endpoints.attach(
            target, input_levels, output_levels, prefix, kind=kind
        )

    def detach(
        self,
        target: Any,
        input_levels: Levels = None,
        output_levels: Levels = None,
    ) -> None:
        """Detach levels from an input/output, or the whole input/output.

        Without levels the endpoint is removed; otherwise it is removed once
        neither of its channels has any level left.

        Raises:
            EndpointNotFoundError: If the object is not attached
        """
        self._endpoints.detach(target, input_levels, output_levels)

    def clear_all(self) -> None:
        """Detach every input/output."""
        self._endpoints.clear()

    def send(self, message: Message | str, level: LogLevel | str | None = None) -> None:
        """Format a message, retain it, and send it to matching outputs.

        Args:
            message: A Message, or the contents of a new message
            level: Level of a new message (settings.default_level when omitted)

        Raises:
            InvalidEndpointTypeError: If an endpoint record has an unknown kind
        """
        if isinstance(message, str):
            message = Message(
                message,
                LogLevel.from_string(level) if level is not None else self._settings.default_level,
                self._settings.prefix,
            )

        if message.computed is None:
            message.computed = format_message(
                message,
                self._settings.format,
                elapsed=time.monotonic() - self._started,
            )

        if self._settings.retain_logs:
            with self._entries_lock:
                self._entries.append(message.computed)

        self._dispatch.depth = getattr(self._dispatch, "depth", 0) + 1
        try:
            for endpoint in self._endpoints.outputs(message.level):
                if message.origin is not None and endpoint.target is message.origin:
                    continue
                adapter = get_adapter(endpoint.kind)
                adapter.send(
                    endpoint.target,
                    replace(message, prefix=endpoint.prefix, origin=None),
                )
            self.emit("send", message)
            self.emit("entry", message.computed, message.level)
        finally:
            self._dispatch.depth -= 1

    def clear(self) -> bool:
        """Clear retained entries.

        Returns:
            Whether the entries were cleared
        """
        if not self._settings.retain_logs or not self._settings.allow_clearing:
            return False

        with self._entries_lock:
            self._entries.clear()
        return True

    def _receive(self, endpoint: Endpoint, message: Message) -> None:
        if getattr(self._dispatch, "depth", 0):
            logger.debug("Dropped inbound echo from %s endpoint", endpoint.kind.value)
            return
        if message.computed is None and message.prefix is None:
            message = replace(message, prefix=self._settings.prefix)
        self.send(message)

    def _forwards_to(self, target: Logger, seen: set[int] | None = None) -> bool:
        """Whether messages sent here can reach ``target`` through logger outputs."""
        seen = seen if seen is not None else set()
        seen.add(id(self))
        for endpoint in self._endpoints:
            if not isinstance(endpoint.target, Logger):
                continue
            if not endpoint.output.enabled or not endpoint.output.levels:
                continue
            if endpoint.target is target:
                return True
            if id(endpoint.target) not in seen and endpoint.target._forwards_to(target, seen):
                return True
        return False

    # shortcut methods

    def log(self, contents: str) -> None:
        """Log a message at LOG level."""
        self.send(contents, LogLevel.LOG)
        self.emit("log", contents)

    def info(self, contents: str) -> None:
        """Log a message at INFO level."""
        self.send(contents, LogLevel.INFO)
        self.emit("info", contents)

    def warn(self, data: BaseException | str) -> BaseException:
        """Log a warning at WARN level.

        Returns:
            The given exception, or a new one built from the message
        """
        contents = str(data)
        self.send(contents, LogLevel.WARN)
        self.emit("warn", contents)
        return data if isinstance(data, BaseException) else Exception(contents)

    def error(self, data: BaseException | str) -> BaseException:
        """Log an error at ERROR level.

        Returns:
            The given exception, or a new one built from the message
        """
        contents = str(data)
        self.send(contents, LogLevel.ERROR)
        self.emit("error", contents)
        return data if isinstance(data, BaseException) else Exception(contents)

    def debug(self, contents: str) -> None:
        """Log a message at DEBUG level."""
        self.send(contents, LogLevel.DEBUG)
        self.emit("debug", contents)
