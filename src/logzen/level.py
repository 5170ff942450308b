# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: logzen
"""
Log levels for logzen.

Levels carry no threshold semantics: an endpoint reacts to a level only if the
level is a member of the endpoint's channel level set.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Final


class LogLevel(str, Enum):
    """Log levels, in declaration order."""

    LOG = "LOG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"
    DEBUG = "DEBUG"

    @property
    def method_name(self) -> str:
        """Name of the console method that handles this level."""
        return self.value.lower()

    def to_stdlib_level(self) -> int:
        """Convert to standard library logging level.

        Returns:
            Standard library logging level integer
        """
        return _STDLIB_LEVELS[self]

    @classmethod
    def from_string(cls, value: str) -> LogLevel:
        """Convert a string to a LogLevel.

        Args:
            value: String representation of level

        Returns:
            LogLevel enum value

        Raises:
            ValueError: If the string doesn't match a valid level
        """
        try:
            return cls(value.upper())
        except ValueError:
            raise ValueError(f"Invalid log level: {value}")


_STDLIB_LEVELS: Final[dict[LogLevel, int]] = {
    LogLevel.LOG: logging.INFO,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARN: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.DEBUG: logging.DEBUG,
}

ALL_LEVELS: Final[frozenset[LogLevel]] = frozenset(LogLevel)
