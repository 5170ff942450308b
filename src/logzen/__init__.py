# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: logzen

"""
Public API for logzen.

logzen formats log messages, retains them in memory and fans them out to
attached inputs and outputs: file-like sinks, readable sources, consoles,
standard library loggers and other logzen loggers.
"""

from __future__ import annotations

from logzen.config import DEFAULT_FORMAT, LoggerSettings
from logzen.console import Console
from logzen.endpoints import (
    Channel,
    Endpoint,
    EndpointCycleError,
    EndpointError,
    EndpointKind,
    EndpointNotFoundError,
    InvalidEndpointTypeError,
    UnsupportedEndpointTypeError,
)
from logzen.errors import ErrorSeverity, LogzenError
from logzen.level import ALL_LEVELS, LogLevel
from logzen.logger import Logger
from logzen.message import Message, format_message

__version__ = "0.4.0"

__all__ = [
    # Core
    "Logger",
    "LogLevel",
    "ALL_LEVELS",
    "Message",
    "format_message",
    "Console",
    # Endpoints
    "Channel",
    "Endpoint",
    "EndpointKind",
    # Settings
    "LoggerSettings",
    "DEFAULT_FORMAT",
    # Errors
    "LogzenError",
    "ErrorSeverity",
    "EndpointError",
    "UnsupportedEndpointTypeError",
    "EndpointNotFoundError",
    "InvalidEndpointTypeError",
    "EndpointCycleError",
]
