"""Factories for tests and prototyping."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

from faker import Faker

from ..core.dispatcher import EventDispatcherInterface
from ..core.events import Event


@dataclass(slots=True)
class RecordedCall:
    listener: str
    event_name: str
    event: Event
    dispatcher: EventDispatcherInterface


@dataclass(slots=True, eq=False)
class RecordingListener:
    """Listener appending every call to a shared log."""

    name: str
    log: list[RecordedCall]
    stop: bool = False
    side_effect: Callable[[Event, str, EventDispatcherInterface], Any] | None = None

    def __call__(self, event: Event, event_name: str, dispatcher: EventDispatcherInterface) -> None:
        self.log.append(RecordedCall(self.name, event_name, event, dispatcher))
        if self.side_effect is not None:
            self.side_effect(event, event_name, dispatcher)
        if self.stop:
            event.stop_propagation()

    @property
    def listener_name(self) -> str:
        return f"RecordingListener({self.name})"

    def on_event(self, event: Event, event_name: str, dispatcher: EventDispatcherInterface) -> None:
        self(event, event_name, dispatcher)


@dataclass(slots=True)
class ListenerFactory:
    faker: Faker = field(default_factory=Faker)
    log: list[RecordedCall] = field(default_factory=list)

    def event_name(self) -> str:
        return f"{self.faker.unique.word()}.{self.faker.unique.word()}"

    def build(self, name: str | None = None, *, stop: bool = False, side_effect=None) -> RecordingListener:
        return RecordingListener(
            name=name or self.faker.unique.user_name(),
            log=self.log,
            stop=stop,
            side_effect=side_effect,
        )

    def calls(self) -> list[str]:
        return [call.listener for call in self.log]

    def reset(self) -> None:
        self.log.clear()
