"""Pytest fixtures for EventForge."""

from __future__ import annotations

import pytest

from ..container.memory import InMemoryContainer
from ..core.container_aware import ContainerAwareEventDispatcher
from ..core.dispatcher import EventDispatcher
from .factory import ListenerFactory


@pytest.fixture()
def dispatcher() -> EventDispatcher:
    return EventDispatcher()


@pytest.fixture()
def container() -> InMemoryContainer:
    return InMemoryContainer()


@pytest.fixture()
def container_dispatcher(container: InMemoryContainer) -> ContainerAwareEventDispatcher:
    return ContainerAwareEventDispatcher(container)


@pytest.fixture()
def listeners() -> ListenerFactory:
    return ListenerFactory()
