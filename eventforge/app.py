"""Top level wiring object for EventForge dispatchers."""

from __future__ import annotations

import logging
from typing import Any

from .config import EventForgeConfig
from .container.base import ServiceLocator
from .container.memory import InMemoryContainer
from .core.container_aware import ContainerAwareEventDispatcher
from .core.dispatcher import EventDispatcherInterface
from .core.immutable import ImmutableEventDispatcher
from .core.listeners import describe_listener
from .core.traceable import TraceableEventDispatcher
from .loaders import load_manifest_from_json

logger = logging.getLogger(__name__)


class EventApp:
    """Central wiring of container, dispatcher and configuration."""

    def __init__(
        self,
        config: EventForgeConfig,
        *,
        container: ServiceLocator | None = None,
        dispatcher: EventDispatcherInterface | None = None,
    ) -> None:
        self.config = config
        self.container = container if container is not None else InMemoryContainer()
        inner = dispatcher if dispatcher is not None else ContainerAwareEventDispatcher(self.container)

        if config.manifest_path is not None:
            if not isinstance(inner, ContainerAwareEventDispatcher):
                raise ValueError("Listener manifests require a container-aware dispatcher")
            definition = load_manifest_from_json(inner, config.manifest_path)
            logger.info(
                "Loaded %s listener(s) and %s subscriber(s) from %s",
                len(definition.listeners),
                len(definition.subscribers),
                config.manifest_path,
            )

        self.dispatcher: EventDispatcherInterface = (
            TraceableEventDispatcher(inner) if config.debug else inner
        )

    def read_only(self) -> ImmutableEventDispatcher:
        """Return a view of the dispatcher that rejects registration changes."""
        return ImmutableEventDispatcher(self.dispatcher)

    def snapshot(self) -> dict[str, Any]:
        """Export registered listeners, in call order, for debugging."""
        return {
            event_name: [describe_listener(listener) for listener in listeners]
            for event_name, listeners in sorted(self.dispatcher.get_listeners().items())
        }
