"""Immediate, type-keyed event dispatch."""

from __future__ import annotations

from collections import defaultdict
from typing import Any, Callable, TypeVar

E = TypeVar("E")


class EventDispatcher:
    """Calls every listener registered for an event's exact type, in registration order."""

    def __init__(self) -> None:
        self._listeners: defaultdict[type, list[Callable[[Any], None]]] = defaultdict(list)

    def dispatch(self, event: Any) -> None:
        """Pass ``event`` to the listeners of its type."""
        for callback in list(self._listeners.get(type(event), ())):
            callback(event)

    def trigger(self, event_type: type[E]) -> E:
        """Dispatch a default-constructed event of ``event_type`` and return it."""
        event = event_type()
        self.dispatch(event)
        return event

    def on(self, event_type: type[E], callback: Callable[[E], None]) -> None:
        """Register a listener that receives the event."""
        self._listeners[event_type].append(callback)

    def on_notify(self, event_type: type, callback: Callable[[], None]) -> None:
        """Register a listener that only needs to know the event happened."""
        self.on(event_type, lambda _event: callback())