"""In-process event bus keyed by event type."""
from __future__ import annotations

from typing import Any, Callable

_Handler = Callable[[Any], None]


class EventBus:
    """Typed pub/sub. ``raise_local`` dispatches immediately; ``publish``
    queues until the next ``flush``.
    """

    def __init__(self) -> None:
        self._subscribers: dict[type, list[_Handler]] = {}
        self._queue: list[Any] = []

    def subscribe(self, event_type: type, handler: _Handler) -> None:
        self._subscribers.setdefault(event_type, []).append(handler)

    def unsubscribe(self, event_type: type, handler: _Handler) -> None:
        handlers = self._subscribers.get(event_type)
        if handlers is None:
            return
        try:
            handlers.remove(handler)
        except ValueError:
            pass

    def raise_local(self, event: Any) -> None:
        # Copy so handlers may unsubscribe themselves while being called.
        for handler in list(self._subscribers.get(type(event), [])):
            handler(event)

    def publish(self, event: Any) -> None:
        self._queue.append(event)

    def flush(self) -> None:
        snapshot = self._queue
        self._queue = []
        for event in snapshot:
            self.raise_local(event)

    def pending(self) -> int:
        return len(self._queue)

    def clear(self) -> None:
        self._queue.clear()
