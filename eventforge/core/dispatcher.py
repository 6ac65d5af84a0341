"""Priority ordered event dispatcher."""

from __future__ import annotations

import logging
from threading import RLock
from typing import Any, Protocol, Sequence, overload

from .events import Event
from .exceptions import InvalidArgumentError
from .listeners import Listener, bind_listener, describe_listener, same_listener
from .subscribers import iter_subscriptions

logger = logging.getLogger(__name__)


class EventDispatcherInterface(Protocol):
    def dispatch(self, event_name: str, event: Event | None = None) -> Event:
        ...

    def add_listener(self, event_name: str, listener: Listener, priority: int = 0) -> None:
        ...

    def add_subscriber(self, subscriber: Any) -> None:
        ...

    def remove_listener(self, event_name: str, listener: Listener) -> None:
        ...

    def remove_subscriber(self, subscriber: Any) -> None:
        ...

    def get_listeners(
        self, event_name: str | None = None
    ) -> list[Listener] | dict[str, list[Listener]]:
        ...

    def has_listeners(self, event_name: str | None = None) -> bool:
        ...

    def get_listener_priority(self, event_name: str, listener: Listener) -> int | None:
        ...


class EventDispatcher(EventDispatcherInterface):
    """Registry of listeners per event, invoked from highest to lowest priority.

    Listeners sharing a priority run in the order they were added. The sorted
    view of an event is cached until that event's listeners change.
    """

    def __init__(self) -> None:
        self._listeners: dict[str, dict[int, list[Listener]]] = {}
        self._sorted: dict[str, list[Listener]] = {}
        self._lock = RLock()

    def dispatch(self, event_name: str, event: Event | None = None) -> Event:
        if event is None:
            event = Event()
        event.dispatcher = self
        event.name = event_name

        with self._lock:
            if event_name not in self._listeners:
                return event
            listeners = self._sorted_listeners(event_name)

        self._do_dispatch(listeners, event_name, event)
        return event

    def _do_dispatch(self, listeners: Sequence[Listener], event_name: str, event: Event) -> None:
        for listener in listeners:
            listener(event, event_name, self)
            if event.is_propagation_stopped():
                break

    @overload
    def get_listeners(self, event_name: str) -> list[Listener]:
        ...

    @overload
    def get_listeners(self, event_name: None = None) -> dict[str, list[Listener]]:
        ...

    def get_listeners(
        self, event_name: str | None = None
    ) -> list[Listener] | dict[str, list[Listener]]:
        with self._lock:
            if event_name is not None:
                if event_name not in self._listeners:
                    return []
                return list(self._sorted_listeners(event_name))
            return {name: list(self._sorted_listeners(name)) for name in list(self._listeners)}

    def has_listeners(self, event_name: str | None = None) -> bool:
        if event_name is not None:
            return bool(self.get_listeners(event_name))
        return any(self.get_listeners().values())

    def get_listener_priority(self, event_name: str, listener: Listener) -> int | None:
        """Return the priority ``listener`` was added with, or None."""
        with self._lock:
            for priority, listeners in self._listeners.get(event_name, {}).items():
                if any(same_listener(candidate, listener) for candidate in listeners):
                    return priority
        return None

    def add_listener(self, event_name: str, listener: Listener, priority: int = 0) -> None:
        if not callable(listener):
            raise InvalidArgumentError(f"Listener for '{event_name}' must be callable, got {listener!r}")
        with self._lock:
            self._listeners.setdefault(event_name, {}).setdefault(priority, []).append(listener)
            self._sorted.pop(event_name, None)
        logger.debug(
            "Added listener %s to '%s' with priority %s",
            describe_listener(listener),
            event_name,
            priority,
        )

    def remove_listener(self, event_name: str, listener: Listener) -> None:
        with self._lock:
            buckets = self._listeners.get(event_name)
            if not buckets:
                return
            removed = 0
            for priority in list(buckets):
                bucket = buckets[priority]
                kept = [candidate for candidate in bucket if not same_listener(candidate, listener)]
                removed += len(bucket) - len(kept)
                if kept:
                    buckets[priority] = kept
                else:
                    del buckets[priority]
            if not buckets:
                del self._listeners[event_name]
            self._sorted.pop(event_name, None)
        if removed:
            logger.debug("Removed %s listener(s) %s from '%s'", removed, describe_listener(listener), event_name)

    def add_subscriber(self, subscriber: Any) -> None:
        bindings = [
            (event_name, bind_listener(subscriber, spec.method), spec.priority)
            for event_name, spec in iter_subscriptions(subscriber)
        ]
        with self._lock:
            for event_name, listener, priority in bindings:
                self.add_listener(event_name, listener, priority)

    def remove_subscriber(self, subscriber: Any) -> None:
        bindings = [
            (event_name, bind_listener(subscriber, spec.method))
            for event_name, spec in iter_subscriptions(subscriber)
        ]
        with self._lock:
            for event_name, listener in bindings:
                self.remove_listener(event_name, listener)

    def _sorted_listeners(self, event_name: str) -> list[Listener]:
        # Caller holds the lock. Cached lists are replaced, never mutated in place.
        cached = self._sorted.get(event_name)
        if cached is None:
            buckets = self._listeners[event_name]
            cached = [
                listener
                for priority in sorted(buckets, reverse=True)
                for listener in buckets[priority]
            ]
            self._sorted[event_name] = cached
        return cached


__all__ = ["EventDispatcher", "EventDispatcherInterface"]
