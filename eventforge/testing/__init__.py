"""Testing utilities for EventForge."""

from .factory import ListenerFactory, RecordedCall, RecordingListener
from .fixtures import container, container_dispatcher, dispatcher, listeners

__all__ = [
    "ListenerFactory",
    "RecordedCall",
    "RecordingListener",
    "container",
    "container_dispatcher",
    "dispatcher",
    "listeners",
]
