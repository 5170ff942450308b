# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: logzen
"""
Synchronous observer notifications.

Handlers run in the emitting call stack. A failing handler is logged and does
not affect the emitter or the remaining handlers.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)

Handler = Callable[..., Any]


class EventEmitter:
    """Named-event observer registry."""

    def __init__(self) -> None:
        self._handlers: dict[str, list[Handler]] = {}
        self._handlers_lock = threading.RLock()

    def on(self, event: str, handler: Handler) -> Callable[[], None]:
        """Subscribe a handler to an event.

        Args:
            event: Event name
            handler: Callable invoked with the event arguments

        Returns:
            A callable that removes the subscription
        """
        with self._handlers_lock:
            self._handlers.setdefault(event, []).append(handler)
        return lambda: self.off(event, handler)

    def once(self, event: str, handler: Handler) -> Callable[[], None]:
        """Subscribe a handler that is removed after its first invocation."""

        def wrapper(*args: Any) -> Any:
            self.off(event, wrapper)
            return handler(*args)

        return self.on(event, wrapper)

    def off(self, event: str, handler: Handler | None = None) -> None:
        """Remove one handler, or every handler of the event when none is given."""
        with self._handlers_lock:
            if handler is None:
                self._handlers.pop(event, None)
                return
            handlers = self._handlers.get(event, [])
            if handler in handlers:
                handlers.remove(handler)

    def listener_count(self, event: str) -> int:
        with self._handlers_lock:
            return len(self._handlers.get(event, []))

    def emit(self, event: str, *args: Any) -> bool:
        """Invoke every handler of an event.

        Returns:
            Whether the event had any handlers
        """
        with self._handlers_lock:
            handlers = list(self._handlers.get(event, []))

        for handler in handlers:
            try:
                handler(*args)
            except Exception as e:
                logger.warning(
                    "Error in %r event handler %r: %s", event, handler, e, exc_info=True
                )
        return bool(handlers)
