# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: logzen

"""
Structural interfaces of the objects logzen can attach.

These protocols document the shape each capability adapter relies on. They
are used for static type checking; kind inference is done by the capability
probe in ``logzen.endpoints.adapters``.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol


class WriterProtocol(Protocol):
    """A text or binary sink such as ``sys.stdout`` or an open file."""

    def write(self, data: Any, /) -> Any:
        ...


class SourceProtocol(Protocol):
    """An event-style readable source.

    ``subscribe`` registers a callback receiving ``str`` or ``bytes`` chunks and
    may return a callable that cancels the subscription. Sources that return
    nothing are expected to provide ``unsubscribe(callback)`` instead.
    """

    def subscribe(self, callback: Callable[[str | bytes], None], /) -> Any:
        ...


class ConsoleProtocol(Protocol):
    """A console-like object with one method per level.

    Any subset of the methods may be present; levels without a method are
    skipped.
    """

    def log(self, data: str, /) -> Any:
        ...

    def info(self, data: str, /) -> Any:
        ...

    def warn(self, data: str, /) -> Any:
        ...

    def error(self, data: str, /) -> Any:
        ...

    def debug(self, data: str, /) -> Any:
        ...
