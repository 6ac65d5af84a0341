"""Debugging wrapper recording which listeners ran for each dispatch."""

from __future__ import annotations

import inspect
import logging
import time
from dataclasses import dataclass, field
from typing import Any

from .dispatcher import EventDispatcherInterface
from .events import Event
from .listeners import Listener, describe_listener, same_listener


@dataclass(slots=True)
class ListenerCall:
    event_name: str
    listener: str
    duration: float
    stopped_propagation: bool = False
    priority: int | None = None
    target: Listener | None = field(default=None, repr=False, compare=False)


class TraceableEventDispatcher(EventDispatcherInterface):
    """Wrap a dispatcher and keep a trace of every listener call.

    Attributes the wrapper does not define (``add_listener_service``,
    ``lazy_load`` ...) are forwarded to the wrapped dispatcher.
    """

    def __init__(
        self,
        dispatcher: EventDispatcherInterface,
        *,
        logger: logging.Logger | None = None,
    ) -> None:
        self._dispatcher = dispatcher
        self._logger = logger or logging.getLogger(__name__)
        self._called: list[ListenerCall] = []
        self._orphaned: list[str] = []

    @property
    def wrapped(self) -> EventDispatcherInterface:
        return self._dispatcher

    def dispatch(self, event_name: str, event: Event | None = None) -> Event:
        if event is None:
            event = Event()
        event.dispatcher = self
        event.name = event_name

        listeners = self._dispatcher.get_listeners(event_name)
        if not listeners:
            if event_name not in self._orphaned:
                self._orphaned.append(event_name)
            return event

        for index, listener in enumerate(listeners):
            name = describe_listener(listener)
            priority = self._dispatcher.get_listener_priority(event_name, listener)
            started = time.perf_counter()
            listener(event, event_name, self)
            duration = time.perf_counter() - started
            stopped = event.is_propagation_stopped()
            self._called.append(
                ListenerCall(event_name, name, duration, stopped, priority, target=listener)
            )
            self._logger.debug('Notified event "%s" to listener "%s".', event_name, name)
            if stopped:
                self._logger.debug(
                    'Listener "%s" stopped propagation of the event "%s".', name, event_name
                )
                for skipped in listeners[index + 1:]:
                    self._logger.debug(
                        'Listener "%s" was not called for event "%s".',
                        describe_listener(skipped),
                        event_name,
                    )
                break
        return event

    def get_called_listeners(self) -> list[ListenerCall]:
        return list(self._called)

    def get_not_called_listeners(self) -> list[tuple[str, str]]:
        """Return ``(event_name, listener)`` pairs registered but never called.

        Service listeners are matched by service method rather than by instance,
        since non-shared services are rebound to a fresh instance on every load.
        """
        not_called = []
        for event_name, listeners in self._dispatcher.get_listeners().items():
            called = [call.target for call in self._called if call.event_name == event_name]
            service_methods = self._service_methods(event_name)
            for listener in listeners:
                if any(same_listener(listener, seen) for seen in called):
                    continue
                if service_methods and _same_service_method(listener, called, service_methods):
                    continue
                not_called.append((event_name, describe_listener(listener)))
        return not_called

    def _service_methods(self, event_name: str) -> set[str]:
        get_services = getattr(self._dispatcher, "get_listener_services", None)
        if get_services is None:
            return set()
        return {binding.method for binding in get_services(event_name)}

    def get_orphaned_events(self) -> list[str]:
        return list(self._orphaned)

    def reset(self) -> None:
        self._called.clear()
        self._orphaned.clear()

    def get_listeners(
        self, event_name: str | None = None
    ) -> list[Listener] | dict[str, list[Listener]]:
        return self._dispatcher.get_listeners(event_name)

    def has_listeners(self, event_name: str | None = None) -> bool:
        return self._dispatcher.has_listeners(event_name)

    def get_listener_priority(self, event_name: str, listener: Listener) -> int | None:
        return self._dispatcher.get_listener_priority(event_name, listener)

    def add_listener(self, event_name: str, listener: Listener, priority: int = 0) -> None:
        self._dispatcher.add_listener(event_name, listener, priority)

    def add_subscriber(self, subscriber: Any) -> None:
        self._dispatcher.add_subscriber(subscriber)

    def remove_listener(self, event_name: str, listener: Listener) -> None:
        self._dispatcher.remove_listener(event_name, listener)

    def remove_subscriber(self, subscriber: Any) -> None:
        self._dispatcher.remove_subscriber(subscriber)

    def __getattr__(self, name: str) -> Any:
        if name == "_dispatcher":
            raise AttributeError(name)
        return getattr(self._dispatcher, name)


def _same_service_method(
    listener: Listener, called: list[Listener | None], methods: set[str]
) -> bool:
    if not inspect.ismethod(listener) or listener.__func__.__name__ not in methods:
        return False
    return any(
        inspect.ismethod(seen)
        and seen.__func__ is listener.__func__
        and type(seen.__self__) is type(listener.__self__)
        for seen in called
    )


__all__ = ["ListenerCall", "TraceableEventDispatcher"]
