"""Synchronous event bus for scan lifecycle events."""

from __future__ import annotations

from typing import Any, Callable

Listener = Callable[[Any], None]


class EventBus:
    """Synchronous publish-subscribe bus.

    Listeners subscribe to one event type or to every event, and are called in
    registration order on the scanning thread. With ``record=True`` the bus
    also keeps every emitted event in :attr:`history`, which the CLI uses to
    report skipped stylesheets after a scan.
    """

    def __init__(self, record: bool = False) -> None:
        self._listeners: dict[type, list[Listener]] = {}
        self._global_listeners: list[Listener] = []
        self._record = record
        self.history: list[Any] = []

    def subscribe(self, event_type: type, callback: Listener) -> Callable[[], None]:
        """Register *callback* for *event_type*; returns an unsubscribe function."""
        listeners = self._listeners.setdefault(event_type, [])
        listeners.append(callback)
        return lambda: listeners.remove(callback)

    def on_all(self, callback: Listener) -> Callable[[], None]:
        """Register *callback* for every event; returns an unsubscribe function."""
        self._global_listeners.append(callback)
        return lambda: self._global_listeners.remove(callback)

    def emit(self, event: Any) -> None:
        if self._record:
            self.history.append(event)
        for cb in list(self._global_listeners):
            cb(event)
        for cb in list(self._listeners.get(type(event), [])):
            cb(event)

    def events_of(self, event_type: type) -> list[Any]:
        """Return recorded events of *event_type*, oldest first."""
        return [e for e in self.history if isinstance(e, event_type)]
