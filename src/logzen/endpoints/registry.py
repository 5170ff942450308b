# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: logzen
"""
Endpoint registry.

Keeps at most one record per attached object identity. Attaching an object
again widens its channels; detaching with levels narrows them, and the record
is dropped once both channels are empty. Detaching without levels drops the
record outright.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterable, Iterator
from typing import Any

from logzen.endpoints.adapters import Probe, get_adapter, probe_kind
from logzen.endpoints.errors import EndpointNotFoundError, UnsupportedEndpointTypeError
from logzen.endpoints.models import Channel, Endpoint, EndpointKind, as_levels
from logzen.level import LogLevel
from logzen.message import Message

logger = logging.getLogger(__name__)

Levels = Iterable[LogLevel | str] | LogLevel | str | None
InboundCallback = Callable[[Endpoint, Message], None]


class EndpointRegistry:
    """Attached endpoints of a single logger."""

    def __init__(
        self,
        *,
        probe: Probe = probe_kind,
        on_inbound: InboundCallback | None = None,
    ) -> None:
        """Initialize the registry.

        Args:
            probe: Capability probe inferring the kind of raw objects
            on_inbound: Called with the endpoint and message for inbound data
        """
        self._probe = probe
        self._on_inbound = on_inbound
        self._endpoints: dict[int, Endpoint] = {}
        self._lock = threading.RLock()

    def __len__(self) -> int:
        return len(self._endpoints)

    def __iter__(self) -> Iterator[Endpoint]:
        with self._lock:
            return iter(list(self._endpoints.values()))

    def __contains__(self, target: Any) -> bool:
        return self.find(target) is not None

    @property
    def count(self) -> int:
        return len(self)

    def find(self, target: Any) -> Endpoint | None:
        """Find the record wrapping an object, or the record itself."""
        if isinstance(target, Endpoint):
            target = target.target
        with self._lock:
            return self._endpoints.get(id(target))

    def resolve_kind(self, target: Any, kind: EndpointKind | None = None) -> EndpointKind:
        """Determine the endpoint kind of an object.

        Raises:
            UnsupportedEndpointTypeError: If no capability adapter matches
        """
        if kind is None and isinstance(target, Endpoint):
            kind = target.kind
            target = target.target
        if kind is None:
            kind = self._probe(target)
        if kind is None:
            raise UnsupportedEndpointTypeError(type(target).__name__)
        try:
            return EndpointKind(kind)
        except ValueError:
            raise UnsupportedEndpointTypeError(str(kind)) from None

    def attach(
        self,
        target: Any,
        input_levels: Levels = None,
        output_levels: Levels = None,
        prefix: str | None = None,
        *,
        kind: EndpointKind | None = None,
    ) -> Endpoint:
        """Attach an object, or merge levels into its existing record.

        Args:
            target: Raw object or prebuilt Endpoint record
            input_levels: Levels accepted from the object (all when omitted)
            output_levels: Levels sent to the object (input_levels when omitted)
            prefix: Prefix applied to messages routed through this endpoint
            kind: Explicit endpoint kind, bypassing the capability probe

        Returns:
            The new or updated record

        Raises:
            UnsupportedEndpointTypeError: If no capability adapter matches
        """
        template = target if isinstance(target, Endpoint) else None
        kind = self.resolve_kind(target, kind)
        adapter = get_adapter(kind)
        obj = template.target if template is not None else target

        if template is not None and input_levels is None and output_levels is None:
            inputs = set(template.input.levels)
            outputs = set(template.output.levels)
            prefix = prefix or template.prefix
        else:
            inputs = as_levels(input_levels)
            outputs = inputs.copy() if output_levels is None else as_levels(output_levels)

        with self._lock:
            existing = self._endpoints.get(id(obj))
            if existing is not None:
                existing.input.levels |= inputs
                existing.output.levels |= outputs
                if prefix:
                    existing.prefix = prefix
                logger.debug("Merged levels into %s endpoint %r", kind.value, obj)
                return existing

            input_enabled = adapter.can_receive
            output_enabled = adapter.can_send
            if template is not None:
                input_enabled = input_enabled and template.input.enabled
                output_enabled = output_enabled and template.output.enabled

            endpoint = Endpoint(
                target=obj,
                kind=kind,
                input=Channel(input_enabled, inputs),
                output=Channel(output_enabled, outputs),
                prefix=prefix,
            )
            self._endpoints[id(obj)] = endpoint

        if endpoint.input.enabled and self._on_inbound is not None:
            try:
                endpoint.unsubscribe = adapter.receive(
                    obj, lambda message: self._inbound(endpoint, message)
                )
            except Exception:
                with self._lock:
                    self._endpoints.pop(id(obj), None)
                raise

        logger.debug("Attached %s endpoint %r", kind.value, obj)
        return endpoint

    def detach(
        self,
        target: Any,
        input_levels: Levels = None,
        output_levels: Levels = None,
    ) -> None:
        """Narrow an endpoint's channels, or remove it.

        Args:
            target: Raw object or Endpoint record
            input_levels: Levels removed from the input channel
            output_levels: Levels removed from the output channel
                (input_levels when omitted)

        Raises:
            EndpointNotFoundError: If the object is not attached
        """
        obj = target.target if isinstance(target, Endpoint) else target
        with self._lock:
            endpoint = self._endpoints.get(id(obj))
            if endpoint is None:
                raise EndpointNotFoundError(type(obj).__name__)

            if input_levels is not None or output_levels is not None:
                inputs = as_levels(input_levels) if input_levels is not None else set()
                outputs = inputs if output_levels is None else as_levels(output_levels)
                endpoint.input.levels -= inputs
                endpoint.output.levels -= outputs
                if not endpoint.is_empty:
                    logger.debug("Removed levels from %s endpoint %r", endpoint.kind.value, obj)
                    return

            del self._endpoints[id(obj)]

        endpoint.close()
        logger.debug("Detached %s endpoint %r", endpoint.kind.value, obj)

    def clear(self) -> None:
        """Remove every endpoint."""
        with self._lock:
            endpoints = list(self._endpoints.values())
            self._endpoints.clear()
        for endpoint in endpoints:
            endpoint.close()

    def outputs(self, level: LogLevel) -> list[Endpoint]:
        """Snapshot of the endpoints whose output channel accepts a level."""
        with self._lock:
            return [e for e in self._endpoints.values() if e.output.accepts(level)]

    def _inbound(self, endpoint: Endpoint, message: Message) -> None:
        with self._lock:
            attached = self._endpoints.get(id(endpoint.target)) is endpoint
            accepted = attached and endpoint.input.accepts(message.level)
        if accepted and self._on_inbound is not None:
            message.origin = endpoint.target
            self._on_inbound(endpoint, message)
