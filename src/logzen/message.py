# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: logzen
"""
Messages and entry formatting.

Templates use ``$name`` tokens:

- ``$time``: time since the logger started, as ``hh:mm:ss``
- ``$level``: the level name
- ``$prefix``: the prefix followed by ``/``, or nothing without a prefix
- ``$message``: the message contents

Unrecognized tokens are left in place.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any

from logzen.config import DEFAULT_FORMAT
from logzen.level import LogLevel

_TOKEN = re.compile(r"\$(\w+)")


@dataclass
class Message:
    """A message travelling between a logger and its endpoints."""

    contents: str
    level: LogLevel = LogLevel.LOG
    prefix: str | None = None
    computed: str | None = None
    # Target of the endpoint an inbound message arrived from.
    origin: Any = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.level, LogLevel):
            self.level = LogLevel.from_string(self.level)


def time_string(elapsed: float) -> str:
    """Format elapsed seconds as ``hh:mm:ss``, rounded to the nearest second."""
    total = int(elapsed + 0.5)
    hours, remainder = divmod(total, 3600)
    minutes, seconds = divmod(remainder, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


def format_message(
    message: Message, template: str = DEFAULT_FORMAT, *, elapsed: float = 0.0
) -> str:
    """Compute the log entry for a message.

    Args:
        message: The message to format
        template: The entry template
        elapsed: Seconds since the logger started

    Returns:
        The formatted entry
    """
    variables = {
        "time": time_string(elapsed),
        "level": message.level.value,
        "prefix": f"{message.prefix}/" if message.prefix else "",
        "message": message.contents,
    }
    return _TOKEN.sub(lambda match: variables.get(match.group(1), match.group(0)), template)
