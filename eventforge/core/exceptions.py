"""Exceptions raised by EventForge dispatchers."""


class EventForgeError(RuntimeError):
    """Base class for dispatcher exceptions."""


class InvalidArgumentError(EventForgeError, ValueError):
    """Raised when a listener, binding or subscriber declaration is malformed."""


class ImmutableDispatcherError(EventForgeError):
    """Raised when a read-only dispatcher is asked to change its listeners."""

    def __init__(self, operation: str) -> None:
        super().__init__(
            f"Unmodifiable event dispatchers must not be modified ({operation} called)."
        )
        self.operation = operation


class ServiceNotFoundError(EventForgeError, LookupError):
    """Raised when a service locator has nothing registered under an id."""

    def __init__(self, service_id: str) -> None:
        super().__init__(f"Service {service_id} not found")
        self.service_id = service_id
