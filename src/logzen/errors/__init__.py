# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: logzen

"""
Error handling for logzen.
"""

from __future__ import annotations

from logzen.errors.base import (
    INTERNAL,
    ErrorCategory,
    ErrorCode,
    ErrorSeverity,
    LogzenError,
)
from logzen.errors.registry import registry

__all__ = [
    "ErrorCode",
    "ErrorCategory",
    "ErrorSeverity",
    "INTERNAL",
    "LogzenError",
    "registry",
]
