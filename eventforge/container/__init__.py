"""Service locators for lazily bound listeners."""

from .base import ServiceLocator
from .memory import InMemoryContainer, ServiceDefinition

__all__ = [
    "InMemoryContainer",
    "ServiceDefinition",
    "ServiceLocator",
]
