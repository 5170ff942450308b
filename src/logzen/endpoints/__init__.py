# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: logzen

"""
Endpoint registry and capability adapters.
"""

from __future__ import annotations

from logzen.endpoints.adapters import (
    ADAPTERS,
    CapabilityAdapter,
    get_adapter,
    probe_kind,
)
from logzen.endpoints.errors import (
    EndpointCycleError,
    EndpointError,
    EndpointNotFoundError,
    InvalidEndpointTypeError,
    UnsupportedEndpointTypeError,
)
from logzen.endpoints.models import Channel, Endpoint, EndpointKind
from logzen.endpoints.registry import EndpointRegistry

__all__ = [
    "ADAPTERS",
    "CapabilityAdapter",
    "Channel",
    "Endpoint",
    "EndpointCycleError",
    "EndpointError",
    "EndpointKind",
    "EndpointNotFoundError",
    "EndpointRegistry",
    "InvalidEndpointTypeError",
    "UnsupportedEndpointTypeError",
    "get_adapter",
    "probe_kind",
]
