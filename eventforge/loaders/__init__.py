"""Loaders for declarative listener bindings."""

from .json_loader import (
    ManifestDefinition,
    SubscriberBinding,
    load_manifest_from_json,
    parse_manifest_dict,
    validate_manifest_dict,
    validate_manifest_file,
)

__all__ = [
    "ManifestDefinition",
    "SubscriberBinding",
    "load_manifest_from_json",
    "parse_manifest_dict",
    "validate_manifest_dict",
    "validate_manifest_file",
]
