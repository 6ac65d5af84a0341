"""Service locator abstraction consumed by the container-aware dispatcher."""

from __future__ import annotations

from typing import Any, Protocol


class ServiceLocator(Protocol):
    def get(self, service_id: str) -> Any:
        """Return the service registered under ``service_id``.

        Raise ``ServiceNotFoundError`` for unknown ids. Implementations may
        return a new instance on every call.
        """
        ...
