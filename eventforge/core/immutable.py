"""Read-only view over another dispatcher."""

from __future__ import annotations

from typing import Any

from .dispatcher import EventDispatcherInterface
from .events import Event
from .exceptions import ImmutableDispatcherError
from .listeners import Listener


class ImmutableEventDispatcher(EventDispatcherInterface):
    """Dispatch through the wrapped dispatcher but refuse every mutation."""

    def __init__(self, dispatcher: EventDispatcherInterface) -> None:
        self._dispatcher = dispatcher

    @property
    def wrapped(self) -> EventDispatcherInterface:
        return self._dispatcher

    def dispatch(self, event_name: str, event: Event | None = None) -> Event:
        return self._dispatcher.dispatch(event_name, event)

    def get_listeners(
        self, event_name: str | None = None
    ) -> list[Listener] | dict[str, list[Listener]]:
        return self._dispatcher.get_listeners(event_name)

    def has_listeners(self, event_name: str | None = None) -> bool:
        return self._dispatcher.has_listeners(event_name)

    def get_listener_priority(self, event_name: str, listener: Listener) -> int | None:
        return self._dispatcher.get_listener_priority(event_name, listener)

    def add_listener(self, event_name: str, listener: Listener, priority: int = 0) -> None:
        raise ImmutableDispatcherError("add_listener")

    def add_subscriber(self, subscriber: Any) -> None:
        raise ImmutableDispatcherError("add_subscriber")

    def remove_listener(self, event_name: str, listener: Listener) -> None:
        raise ImmutableDispatcherError("remove_listener")

    def remove_subscriber(self, subscriber: Any) -> None:
        raise ImmutableDispatcherError("remove_subscriber")


__all__ = ["ImmutableEventDispatcher"]
