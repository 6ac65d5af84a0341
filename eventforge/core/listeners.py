"""Listener identity and naming helpers."""

from __future__ import annotations

import inspect
from typing import TYPE_CHECKING, Any, Callable

from .exceptions import InvalidArgumentError

if TYPE_CHECKING:
    from .dispatcher import EventDispatcherInterface
    from .events import Event


Listener = Callable[["Event", str, "EventDispatcherInterface"], Any]


def same_listener(left: Listener, right: Listener) -> bool:
    """Return True when both handles point at the same callable.

    Bound methods are created anew on every attribute access, so two of them
    match when they share the instance and the underlying function.
    """
    if left is right:
        return True
    if inspect.ismethod(left) and inspect.ismethod(right):
        return left.__self__ is right.__self__ and left.__func__ is right.__func__
    return False


def describe_listener(listener: Listener) -> str:
    """Human readable name used by logs, traces and the CLI.

    Callable objects may expose a ``listener_name`` string to override the default.
    """
    if inspect.ismethod(listener):
        owner = listener.__self__
        owner_name = owner.__name__ if inspect.isclass(owner) else type(owner).__name__
        return f"{owner_name}.{listener.__func__.__name__}"
    if inspect.isfunction(listener) or inspect.isbuiltin(listener):
        return getattr(listener, "__qualname__", listener.__name__)
    named = getattr(listener, "listener_name", None)
    if isinstance(named, str):
        return named
    return f"{type(listener).__name__}.__call__"


def bind_listener(owner: Any, method: str) -> Listener:
    """Fetch ``owner.method`` as a listener, rejecting missing or plain attributes."""
    try:
        listener = getattr(owner, method)
    except AttributeError as exc:
        raise InvalidArgumentError(f"{type(owner).__name__} has no method '{method}'") from exc
    if not callable(listener):
        raise InvalidArgumentError(f"{type(owner).__name__}.{method} is not callable")
    return listener
