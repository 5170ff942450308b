# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: logzen
"""
Endpoint-specific error classes.
"""

from __future__ import annotations

from typing import Any, Final

from logzen.errors.base import ErrorCategory, ErrorCode, ErrorSeverity, LogzenError

ENDPOINT = ErrorCategory.get_or_create("ENDPOINT")
ENDPOINT_ERROR: Final = ErrorCode.get_or_create("ENDPOINT_ERROR", ENDPOINT)
ENDPOINT_UNSUPPORTED_TYPE: Final = ErrorCode.get_or_create(
    "ENDPOINT_UNSUPPORTED_TYPE", ENDPOINT
)
ENDPOINT_NOT_FOUND: Final = ErrorCode.get_or_create("ENDPOINT_NOT_FOUND", ENDPOINT)
ENDPOINT_INVALID_TYPE: Final = ErrorCode.get_or_create(
    "ENDPOINT_INVALID_TYPE", ENDPOINT
)
ENDPOINT_CYCLE: Final = ErrorCode.get_or_create("ENDPOINT_CYCLE", ENDPOINT)


class EndpointError(LogzenError):
    """Base class for all endpoint-related errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ENDPOINT_ERROR,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        """Initialize an endpoint error.

        Args:
            message: Human-readable error message
            code: Error code
            severity: How severe this error is
            context: Additional context information
            **kwargs: Additional context keys (will be merged with context)
        """
        super().__init__(
            message,
            code=code,
            severity=severity,
            context=context,
            **kwargs,
        )


class UnsupportedEndpointTypeError(EndpointError):
    """Raised by attach when no capability adapter matches the target."""

    def __init__(
        self,
        target_type: str,
        code: ErrorCode = ENDPOINT_UNSUPPORTED_TYPE,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            f"Unsupported endpoint type: {target_type}",
            code=code,
            severity=severity,
            context=context,
            target_type=target_type,
            **kwargs,
        )


class EndpointNotFoundError(EndpointError):
    """Raised by detach when the target is not attached."""

    def __init__(
        self,
        target_type: str,
        code: ErrorCode = ENDPOINT_NOT_FOUND,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            f"Endpoint not attached to logger: {target_type}",
            code=code,
            severity=severity,
            context=context,
            target_type=target_type,
            **kwargs,
        )


class InvalidEndpointTypeError(EndpointError):
    """Raised when an endpoint record's kind has no adapter."""

    def __init__(
        self,
        kind: Any,
        code: ErrorCode = ENDPOINT_INVALID_TYPE,
        severity: ErrorSeverity = ErrorSeverity.FATAL,
        context: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            f"Invalid endpoint type: {kind!r}",
            code=code,
            severity=severity,
            context=context,
            kind=kind,
            **kwargs,
        )


class EndpointCycleError(EndpointError):
    """Raised when attaching a logger would create a forwarding cycle."""

    def __init__(
        self,
        message: str = "Attaching this logger would create a forwarding cycle",
        code: ErrorCode = ENDPOINT_CYCLE,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            message,
            code=code,
            severity=severity,
            context=context,
            **kwargs,
        )
