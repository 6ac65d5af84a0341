"""Configuration models for EventForge."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

_TRUTHY = {"1", "true", "yes"}
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(slots=True)
class EventForgeConfig:
    """Top-level configuration container."""

    debug: bool = False
    manifest_path: Path | None = None
    log_level: LogLevel = "WARNING"

    @classmethod
    def from_env(cls) -> "EventForgeConfig":
        """Create config from environment variables prefixed with EVENTFORGE_."""
        prefix = "EVENTFORGE_"
        manifest = os.getenv(f"{prefix}MANIFEST")
        log_level = os.getenv(f"{prefix}LOG_LEVEL", "WARNING").strip().upper() or "WARNING"
        if log_level not in _LOG_LEVELS:
            raise ValueError(f"Invalid {prefix}LOG_LEVEL '{log_level}'")
        return cls(
            debug=os.getenv(f"{prefix}DEBUG", "false").lower() in _TRUTHY,
            manifest_path=Path(manifest).expanduser() if manifest else None,
            log_level=log_level,  # type: ignore[arg-type]
        )
