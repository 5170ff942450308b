# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: logzen
"""
Endpoint records and their channel state.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from logzen.level import ALL_LEVELS, LogLevel


class EndpointKind(str, Enum):
    """Discriminant selecting the capability adapter of an endpoint."""

    LOGGER = "logger"
    STDLIB = "stdlib"
    CONSOLE = "console"
    WRITER = "writer"
    STREAM_WRITER = "stream_writer"
    SOURCE = "source"
    STREAM_READER = "stream_reader"


def as_levels(levels: Iterable[LogLevel | str] | LogLevel | str | None) -> set[LogLevel]:
    """Normalize a level or an iterable of levels into a set.

    ``None`` means every level.
    """
    if levels is None:
        return set(ALL_LEVELS)
    if isinstance(levels, str):
        levels = (levels,)
    return {LogLevel.from_string(level) for level in levels}


@dataclass(eq=False)
class Channel:
    """One direction of an endpoint."""

    enabled: bool = True
    levels: set[LogLevel] = field(default_factory=lambda: set(ALL_LEVELS))

    def accepts(self, level: LogLevel) -> bool:
        return self.enabled and level in self.levels


@dataclass(eq=False)
class Endpoint:
    """An attached object together with its input and output channels.

    Records compare by identity; the wrapped target is referenced, never copied.
    """

    target: Any
    kind: EndpointKind
    input: Channel = field(default_factory=Channel)
    output: Channel = field(default_factory=Channel)
    prefix: str | None = None
    unsubscribe: Callable[[], None] | None = field(default=None, repr=False)

    @property
    def is_empty(self) -> bool:
        """Whether neither channel has any level left."""
        return not self.input.levels and not self.output.levels

    def close(self) -> None:
        """Cancel the inbound subscription, if any."""
        unsubscribe, self.unsubscribe = self.unsubscribe, None
        if unsubscribe is not None:
            unsubscribe()
