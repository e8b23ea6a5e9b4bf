# panzoom/utils/event_bus.py
"""
Tiny pub/sub used for host notifications such as viewport resizes:

    off = bus.on(VIEWPORT_RESIZED, controller.on_viewport_resized)
    bus.emit(VIEWPORT_RESIZED, w=800, h=600)
    off()
"""
from __future__ import annotations

from typing import Any, Callable, Dict, List

Handler = Callable[[Dict[str, Any]], None]

# Payload: w=<int>, h=<int> (both optional; handlers may re-query the viewport)
VIEWPORT_RESIZED = "viewport_resized"


class EventBus:
    """Topic -> handlers. Handlers run synchronously in subscription order."""

    def __init__(self) -> None:
        self._subs: Dict[str, List[Handler]] = {}

    def on(self, topic: str, handler: Handler) -> Callable[[], None]:
        """Subscribe; returns a callable that unsubscribes."""
        self._subs.setdefault(topic, []).append(handler)
        return lambda: self.off(topic, handler)

    def off(self, topic: str, handler: Handler) -> None:
        handlers = self._subs.get(topic)
        if handlers and handler in handlers:
            handlers.remove(handler)

    def emit(self, topic: str, **payload: Any) -> None:
        # Copy so handlers may unsubscribe while being called.
        for handler in tuple(self._subs.get(topic, ())):
            handler(payload)

    def has_subscribers(self, topic: str) -> bool:
        return bool(self._subs.get(topic))
