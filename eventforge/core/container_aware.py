"""Dispatcher that resolves listeners from a service locator on demand."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Sequence, overload

from .dispatcher import EventDispatcher
from .events import Event
from .exceptions import InvalidArgumentError
from .listeners import Listener, bind_listener, same_listener
from .subscribers import iter_subscriptions, resolve_subscriber_class
from ..container.base import ServiceLocator

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ServiceBinding:
    """A listener known only by service id and method name."""

    service_id: str
    method: str
    priority: int = 0

    @property
    def key(self) -> str:
        return f"{self.service_id}.{self.method}"


class ContainerAwareEventDispatcher(EventDispatcher):
    """Event dispatcher whose listeners may live in a service container.

    Service listeners are recorded as bindings and only fetched from the
    locator when an event is dispatched or inspected. Every lazy load asks the
    locator again; when it hands back a different instance than last time the
    stale bound method is swapped for the fresh one, so a non-shared service
    never accumulates listeners.
    """

    def __init__(self, container: ServiceLocator) -> None:
        super().__init__()
        self._container = container
        self._bindings: dict[str, list[ServiceBinding]] = {}
        self._resolved: dict[str, dict[str, Any]] = {}

    def get_container(self) -> ServiceLocator:
        return self._container

    def add_listener_service(
        self, event_name: str, callback: Sequence[str], priority: int = 0
    ) -> None:
        """Bind ``callback = (service_id, method)`` to ``event_name``."""
        if (
            isinstance(callback, str)
            or not isinstance(callback, Sequence)
            or len(callback) != 2
            or not all(isinstance(part, str) and part for part in callback)
        ):
            raise InvalidArgumentError('Expected a ("service", "method") pair as callback')
        if isinstance(priority, bool) or not isinstance(priority, int):
            raise InvalidArgumentError(f"Priority must be an integer, got {priority!r}")
        service_id, method = callback
        with self._lock:
            self._bindings.setdefault(event_name, []).append(
                ServiceBinding(service_id, method, priority)
            )
        logger.debug(
            "Bound service %s.%s to '%s' with priority %s", service_id, method, event_name, priority
        )

    def add_subscriber_service(self, service_id: str, subscriber_class: type | str) -> None:
        """Bind every subscription declared by ``subscriber_class`` to ``service_id``.

        The service itself is not fetched until one of its events is used.
        """
        cls = resolve_subscriber_class(subscriber_class)
        bindings = [
            (event_name, ServiceBinding(service_id, spec.method, spec.priority))
            for event_name, spec in iter_subscriptions(cls)
        ]
        with self._lock:
            for event_name, binding in bindings:
                self._bindings.setdefault(event_name, []).append(binding)
        logger.debug(
            "Bound subscriber service %s (%s) to %s event(s)",
            service_id,
            cls.__name__,
            len({event_name for event_name, _ in bindings}),
        )

    def get_listener_services(
        self, event_name: str | None = None
    ) -> list[ServiceBinding] | dict[str, list[ServiceBinding]]:
        with self._lock:
            if event_name is not None:
                return list(self._bindings.get(event_name, ()))
            return {name: list(bindings) for name, bindings in self._bindings.items()}

    def lazy_load(self, event_name: str) -> None:
        """Resolve the bindings of ``event_name`` and sync them into the registry."""
        with self._lock:
            bindings = list(self._bindings.get(event_name, ()))
            if not bindings:
                return
            resolved = self._resolved.setdefault(event_name, {})
            for binding in bindings:
                instance = self._container.get(binding.service_id)
                previous = resolved.get(binding.key, _MISSING)
                if previous is _MISSING:
                    self.add_listener(
                        event_name, bind_listener(instance, binding.method), binding.priority
                    )
                elif previous is not instance:
                    logger.debug(
                        "Service %s returned a new instance; rebinding '%s'",
                        binding.service_id,
                        event_name,
                    )
                    EventDispatcher.remove_listener(
                        self, event_name, getattr(previous, binding.method)
                    )
                    self.add_listener(
                        event_name, bind_listener(instance, binding.method), binding.priority
                    )
                resolved[binding.key] = instance

    def dispatch(self, event_name: str, event: Event | None = None) -> Event:
        self.lazy_load(event_name)
        return super().dispatch(event_name, event)

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
            if event_name is None:
                for service_event in list(self._bindings):
                    self.lazy_load(service_event)
            else:
                self.lazy_load(event_name)
            return super().get_listeners(event_name)

    def get_listener_priority(self, event_name: str, listener: Listener) -> int | None:
        with self._lock:
            # Already registered listeners are answered without re-resolving services.
            priority = super().get_listener_priority(event_name, listener)
            if priority is None:
                self.lazy_load(event_name)
                priority = super().get_listener_priority(event_name, listener)
            return priority

    def remove_listener(self, event_name: str, listener: Listener) -> None:
        with self._lock:
            self.lazy_load(event_name)
            bindings = self._bindings.get(event_name)
            resolved = self._resolved.get(event_name, {})
            if bindings:
                matched = {
                    binding.key
                    for binding in bindings
                    if binding.key in resolved
                    and same_listener(listener, getattr(resolved[binding.key], binding.method, None))
                }
                kept = [binding for binding in bindings if binding.key not in matched]
                if kept:
                    self._bindings[event_name] = kept
                else:
                    del self._bindings[event_name]
                for key in matched:
                    del resolved[key]
                if not resolved:
                    self._resolved.pop(event_name, None)
            super().remove_listener(event_name, listener)


_MISSING = object()


__all__ = ["ContainerAwareEventDispatcher", "ServiceBinding"]
