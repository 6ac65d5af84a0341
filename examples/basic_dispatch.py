"""Example wiring of an order workflow on top of EventForge.

Run ``eventforge-debug examples.basic_dispatch`` from the repository root to
list the registered listeners.
"""

from __future__ import annotations

import logging
from pathlib import Path

from eventforge import EventApp, GenericEvent
from eventforge.loaders import load_manifest_from_json

logger = logging.getLogger(__name__)


class Mailer:
    def on_order_placed(self, event: GenericEvent, event_name: str, dispatcher) -> None:
        logger.info("Mailing confirmation for order %s", event.get_subject())


class Stock:
    def __init__(self) -> None:
        self.reserved: dict[str, int] = {}

    def reserve(self, event: GenericEvent, event_name: str, dispatcher) -> None:
        sku = event.get_argument("sku")
        available = self.reserved.get(sku, 0)
        if event.get_argument("quantity") > 10 - available:
            logger.warning("Not enough %s in stock, order %s rejected", sku, event.get_subject())
            event.stop_propagation()
            return
        self.reserved[sku] = available + event.get_argument("quantity")


class AuditSubscriber:
    @classmethod
    def get_subscribed_events(cls):
        return {
            "order.placed": ("record", -100),
            "order.cancelled": "record",
        }

    def __init__(self) -> None:
        self.entries: list[str] = []

    def record(self, event: GenericEvent, event_name: str, dispatcher) -> None:
        self.entries.append(f"{event_name}:{event.get_subject()}")


def register(app: EventApp) -> None:
    """Register services and load the listener manifest."""
    app.container.register("mailer", Mailer)
    app.container.register("stock", Stock)
    app.container.register("audit", AuditSubscriber)
    load_manifest_from_json(app.dispatcher, Path(__file__).with_name("listeners.json"))
