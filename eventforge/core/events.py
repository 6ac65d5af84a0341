"""Event carriers passed to listeners."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Iterator, Mapping

if TYPE_CHECKING:
    from .dispatcher import EventDispatcherInterface


@dataclass(slots=True)
class Event:
    """Base carrier handed to every listener of a dispatch.

    ``name`` and ``dispatcher`` are stamped by the dispatcher before any
    listener runs. Once ``stop_propagation`` is called the remaining listeners
    of the current dispatch are skipped.
    """

    name: str | None = None
    dispatcher: EventDispatcherInterface | None = None
    _propagation_stopped: bool = field(default=False, init=False, repr=False)

    def stop_propagation(self) -> None:
        self._propagation_stopped = True

    def is_propagation_stopped(self) -> bool:
        return self._propagation_stopped


@dataclass(slots=True)
class GenericEvent(Event):
    """Event wrapping a subject and a bag of named arguments."""

    subject: Any = None
    arguments: dict[str, Any] = field(default_factory=dict)

    def get_subject(self) -> Any:
        return self.subject

    def get_argument(self, key: str) -> Any:
        try:
            return self.arguments[key]
        except KeyError as exc:
            raise KeyError(f"Argument {key} not found") from exc

    def set_argument(self, key: str, value: Any) -> "GenericEvent":
        self.arguments[key] = value
        return self

    def has_argument(self, key: str) -> bool:
        return key in self.arguments

    def get_arguments(self) -> dict[str, Any]:
        return dict(self.arguments)

    def set_arguments(self, arguments: Mapping[str, Any] | None = None) -> "GenericEvent":
        self.arguments = dict(arguments or {})
        return self

    def __getitem__(self, key: str) -> Any:
        return self.get_argument(key)

    def __setitem__(self, key: str, value: Any) -> None:
        self.arguments[key] = value

    def __delitem__(self, key: str) -> None:
        self.arguments.pop(key, None)

    def __contains__(self, key: object) -> bool:
        return key in self.arguments

    def __iter__(self) -> Iterator[str]:
        return iter(self.arguments)
