"""EventForge public API."""

from .app import EventApp
from .config import EventForgeConfig
from .container import InMemoryContainer, ServiceLocator
from .core import (
    ContainerAwareEventDispatcher,
    Event,
    EventDispatcher,
    EventDispatcherInterface,
    EventForgeError,
    EventSubscriber,
    GenericEvent,
    ImmutableDispatcherError,
    ImmutableEventDispatcher,
    InvalidArgumentError,
    ServiceNotFoundError,
    TraceableEventDispatcher,
)

__all__ = [
    "ContainerAwareEventDispatcher",
    "Event",
    "EventApp",
    "EventDispatcher",
    "EventDispatcherInterface",
    "EventForgeConfig",
    "EventForgeError",
    "EventSubscriber",
    "GenericEvent",
    "ImmutableDispatcherError",
    "ImmutableEventDispatcher",
    "InMemoryContainer",
    "InvalidArgumentError",
    "ServiceLocator",
    "ServiceNotFoundError",
    "TraceableEventDispatcher",
]
