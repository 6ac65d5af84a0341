"""Validation utilities for wired dispatchers."""

from __future__ import annotations

from .core.container_aware import ContainerAwareEventDispatcher
from .core.dispatcher import EventDispatcherInterface
from .core.exceptions import ServiceNotFoundError
from .core.immutable import ImmutableEventDispatcher
from .core.listeners import describe_listener, same_listener
from .core.traceable import TraceableEventDispatcher


def validate_dispatcher(dispatcher: EventDispatcherInterface) -> list[str]:
    """Return list of problems discovered in the dispatcher's registrations."""
    errors: list[str] = []
    target = dispatcher
    while isinstance(target, (TraceableEventDispatcher, ImmutableEventDispatcher)):
        target = target.wrapped

    if isinstance(target, ContainerAwareEventDispatcher):
        container = target.get_container()
        for event_name, bindings in target.get_listener_services().items():
            for binding in bindings:
                try:
                    service = container.get(binding.service_id)
                except ServiceNotFoundError:
                    errors.append(
                        f"Event '{event_name}' references unknown service '{binding.service_id}'."
                    )
                    continue
                if not callable(getattr(service, binding.method, None)):
                    errors.append(
                        f"Service '{binding.service_id}' has no callable '{binding.method}' "
                        f"for event '{event_name}'."
                    )
    if errors:
        return errors

    for event_name, listeners in target.get_listeners().items():
        reported: list = []
        for listener in listeners:
            if any(same_listener(listener, seen) for seen in reported):
                continue
            count = sum(1 for other in listeners if same_listener(listener, other))
            if count > 1:
                errors.append(
                    f"Listener '{describe_listener(listener)}' is registered {count} times "
                    f"for event '{event_name}'."
                )
            reported.append(listener)

    return errors


__all__ = ["validate_dispatcher"]
