"""Event dispatchers and the types they work with."""

from .container_aware import ContainerAwareEventDispatcher, ServiceBinding
from .dispatcher import EventDispatcher, EventDispatcherInterface
from .events import Event, GenericEvent
from .exceptions import (
    EventForgeError,
    ImmutableDispatcherError,
    InvalidArgumentError,
    ServiceNotFoundError,
)
from .immutable import ImmutableEventDispatcher
from .listeners import Listener, describe_listener, same_listener
from .subscribers import EventSubscriber, ListenerSpec
from .traceable import ListenerCall, TraceableEventDispatcher

__all__ = [
    "ContainerAwareEventDispatcher",
    "Event",
    "EventDispatcher",
    "EventDispatcherInterface",
    "EventForgeError",
    "EventSubscriber",
    "GenericEvent",
    "ImmutableDispatcherError",
    "ImmutableEventDispatcher",
    "InvalidArgumentError",
    "Listener",
    "ListenerCall",
    "ListenerSpec",
    "ServiceBinding",
    "ServiceNotFoundError",
    "TraceableEventDispatcher",
    "describe_listener",
    "same_listener",
]
