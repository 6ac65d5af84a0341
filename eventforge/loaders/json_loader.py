"""Load service listener bindings from JSON manifests."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Sequence

from ..core.container_aware import ContainerAwareEventDispatcher, ServiceBinding


@dataclass(slots=True)
class SubscriberBinding:
    service_id: str
    subscriber_class: str


@dataclass(slots=True)
class ManifestDefinition:
    listeners: Sequence[tuple[str, ServiceBinding]]
    subscribers: Sequence[SubscriberBinding]


def load_manifest_from_json(
    dispatcher: ContainerAwareEventDispatcher, path: str | Path
) -> ManifestDefinition:
    """Load a manifest file and bind its services on the dispatcher."""
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    definition = parse_manifest_dict(data)
    for event_name, binding in definition.listeners:
        dispatcher.add_listener_service(
            event_name, (binding.service_id, binding.method), binding.priority
        )
    for subscriber in definition.subscribers:
        dispatcher.add_subscriber_service(subscriber.service_id, subscriber.subscriber_class)
    return definition


def parse_manifest_dict(data: dict[str, Any]) -> ManifestDefinition:
    """Parse a JSON dict (already decoded) into bindings."""
    errors = validate_manifest_dict(data)
    if errors:
        raise ValueError(_format_errors("Manifest validation failed", errors))
    listeners = tuple(parse_listener(entry) for entry in data.get("listeners", []))
    subscribers = tuple(
        SubscriberBinding(service_id=entry["service"], subscriber_class=entry["class"])
        for entry in data.get("subscribers", [])
    )
    return ManifestDefinition(listeners=listeners, subscribers=subscribers)


def parse_listener(entry: dict[str, Any]) -> tuple[str, ServiceBinding]:
    return entry["event"], ServiceBinding(
        service_id=entry["service"],
        method=entry["method"],
        priority=int(entry.get("priority", 0)),
    )


def validate_manifest_file(path: str | Path) -> list[str]:
    """Validate manifest JSON file and return a list of errors."""
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        return [f"Manifest is not valid JSON: {exc}"]
    return validate_manifest_dict(data)


def validate_manifest_dict(data: Any) -> list[str]:
    errors: list[str] = []
    if not isinstance(data, dict):
        return ["Manifest must be a JSON object."]

    listeners_raw = data.get("listeners")
    subscribers_raw = data.get("subscribers")
    if listeners_raw is None and subscribers_raw is None:
        errors.append("Manifest must contain a 'listeners' or 'subscribers' array.")

    if listeners_raw is not None:
        if not isinstance(listeners_raw, list):
            errors.append("Manifest 'listeners' must be an array.")
        else:
            for idx, entry in enumerate(listeners_raw, start=1):
                if not isinstance(entry, dict):
                    errors.append(f"Listener #{idx} must be an object.")
                    continue
                for field_name in ("event", "service", "method"):
                    value = entry.get(field_name)
                    if not isinstance(value, str) or not value.strip():
                        errors.append(f"Listener #{idx} must define non-empty '{field_name}'.")
                priority = entry.get("priority", 0)
                if isinstance(priority, bool) or not isinstance(priority, int):
                    errors.append(f"Listener #{idx} has invalid 'priority' value '{priority}'.")

    if subscribers_raw is not None:
        if not isinstance(subscribers_raw, list):
            errors.append("Manifest 'subscribers' must be an array.")
        else:
            for idx, entry in enumerate(subscribers_raw, start=1):
                if not isinstance(entry, dict):
                    errors.append(f"Subscriber #{idx} must be an object.")
                    continue
                for field_name in ("service", "class"):
                    value = entry.get(field_name)
                    if not isinstance(value, str) or not value.strip():
                        errors.append(f"Subscriber #{idx} must define non-empty '{field_name}'.")

    return errors


def _format_errors(prefix: str, errors: Iterable[str]) -> str:
    formatted = "\n".join(f"- {err}" for err in errors)
    return f"{prefix}:\n{formatted}"
