"""Subscriber declarations and their parsing."""

from __future__ import annotations

import importlib
import inspect
from dataclasses import dataclass
from typing import Any, Iterator, Mapping, Protocol, Sequence, Union

from .exceptions import InvalidArgumentError

SubscriberSpec = Union[str, Sequence[Any]]


class EventSubscriber(Protocol):
    """Object declaring which of its methods listen to which events.

    ``get_subscribed_events`` must work on the class itself, so implement it as
    a classmethod or staticmethod. Values are a method name, a
    ``(method, priority)`` pair or a list of those::

        @classmethod
        def get_subscribed_events(cls):
            return {
                "order.placed": "on_placed",
                "order.paid": ("on_paid", 10),
                "order.shipped": [("notify", 5), ("archive", -5)],
            }
    """

    @classmethod
    def get_subscribed_events(cls) -> Mapping[str, SubscriberSpec]:
        ...


@dataclass(frozen=True, slots=True)
class ListenerSpec:
    method: str
    priority: int = 0


def parse_listener_specs(event_name: str, params: SubscriberSpec) -> tuple[ListenerSpec, ...]:
    """Normalise one declaration value into ordered listener specs."""
    if isinstance(params, str):
        return (ListenerSpec(params),)
    if not isinstance(params, Sequence) or not params:
        raise InvalidArgumentError(
            f"Subscription for '{event_name}' must be a method name, a (method, priority) "
            f"pair or a non-empty list of them, got {params!r}"
        )
    # ("on_a", 10) is a single pair; ["on_a", "on_b"] and ["on_a", ("on_b", 5)] are lists.
    if isinstance(params[0], str) and (len(params) == 1 or not isinstance(params[1], Sequence)):
        return (_parse_pair(event_name, params),)
    specs = []
    for entry in params:
        if isinstance(entry, str):
            specs.append(ListenerSpec(entry))
        elif isinstance(entry, Sequence) and entry and isinstance(entry[0], str):
            specs.append(_parse_pair(event_name, entry))
        else:
            raise InvalidArgumentError(
                f"Subscription for '{event_name}' contains malformed entry {entry!r}"
            )
    return tuple(specs)


def _parse_pair(event_name: str, pair: Sequence[Any]) -> ListenerSpec:
    if len(pair) > 2:
        raise InvalidArgumentError(
            f"Subscription for '{event_name}' expects (method, priority), got {pair!r}"
        )
    priority = pair[1] if len(pair) == 2 else 0
    if isinstance(priority, bool) or not isinstance(priority, int):
        raise InvalidArgumentError(
            f"Priority for '{event_name}' -> '{pair[0]}' must be an integer, got {priority!r}"
        )
    return ListenerSpec(pair[0], priority)


def iter_subscriptions(subscriber: Any) -> Iterator[tuple[str, ListenerSpec]]:
    """Yield ``(event_name, spec)`` in declaration order.

    Every value is parsed before anything is yielded, so a malformed
    declaration fails before the caller registers a single listener.
    """
    declaration = _declaration_of(subscriber)
    parsed = [
        (event_name, parse_listener_specs(event_name, params))
        for event_name, params in declaration.items()
    ]
    for event_name, specs in parsed:
        for spec in specs:
            yield event_name, spec


def _declaration_of(subscriber: Any) -> Mapping[str, SubscriberSpec]:
    accessor = getattr(subscriber, "get_subscribed_events", None)
    if accessor is None or not callable(accessor):
        raise InvalidArgumentError(
            f"{subscriber!r} does not declare get_subscribed_events()"
        )
    declaration = accessor()
    if not isinstance(declaration, Mapping):
        raise InvalidArgumentError(
            f"get_subscribed_events() of {subscriber!r} must return a mapping"
        )
    return declaration


def resolve_subscriber_class(subscriber_class: type | str) -> type:
    """Accept a class or an import string such as ``"pkg.module:Class"``."""
    if inspect.isclass(subscriber_class):
        return subscriber_class
    if not isinstance(subscriber_class, str) or not subscriber_class:
        raise InvalidArgumentError(f"Invalid subscriber class {subscriber_class!r}")
    if ":" in subscriber_class:
        module_name, _, attr = subscriber_class.partition(":")
    else:
        module_name, _, attr = subscriber_class.rpartition(".")
    if not module_name or not attr:
        raise InvalidArgumentError(f"Invalid subscriber class path '{subscriber_class}'")
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise InvalidArgumentError(f"Cannot import module '{module_name}'") from exc
    try:
        resolved = getattr(module, attr)
    except AttributeError as exc:
        raise InvalidArgumentError(
            f"Module '{module_name}' has no attribute '{attr}'"
        ) from exc
    if not inspect.isclass(resolved):
        raise InvalidArgumentError(f"'{subscriber_class}' is not a class")
    return resolved


__all__ = [
    "EventSubscriber",
    "ListenerSpec",
    "SubscriberSpec",
    "iter_subscriptions",
    "parse_listener_specs",
    "resolve_subscriber_class",
]
