"""In-memory service container."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable

from ..core.exceptions import ServiceNotFoundError
from .base import ServiceLocator


@dataclass(slots=True)
class ServiceDefinition:
    factory: Callable[[], Any]
    shared: bool = True


class InMemoryContainer(ServiceLocator):
    """Hold ready instances and factories keyed by service id.

    Shared factories run once; non-shared factories build a fresh instance on
    every ``get``.
    """

    def __init__(self) -> None:
        self._instances: dict[str, Any] = {}
        self._definitions: dict[str, ServiceDefinition] = {}

    def set(self, service_id: str, instance: Any) -> None:
        self._definitions.pop(service_id, None)
        self._instances[service_id] = instance

    def register(self, service_id: str, factory: Callable[[], Any], *, shared: bool = True) -> None:
        if not callable(factory):
            raise ValueError(f"Factory for service {service_id} must be callable")
        self._instances.pop(service_id, None)
        self._definitions[service_id] = ServiceDefinition(factory=factory, shared=shared)

    def has(self, service_id: str) -> bool:
        return service_id in self._instances or service_id in self._definitions

    def get(self, service_id: str) -> Any:
        if service_id in self._instances:
            return self._instances[service_id]
        try:
            definition = self._definitions[service_id]
        except KeyError as exc:
            raise ServiceNotFoundError(service_id) from exc
        instance = definition.factory()
        if definition.shared:
            self._instances[service_id] = instance
        return instance

    def ids(self) -> Iterable[str]:
        return sorted({*self._instances, *self._definitions})
