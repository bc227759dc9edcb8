"""Plain data types describing commands, environment variables and caches."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class DaggerEnvVars:
    """An environment variable for a container task."""

    name: str
    value: str
    expand: bool = False


@dataclass(frozen=True)
class CacheFns:
    """Settings for a cache volume."""

    cache_volume_key: str


@dataclass
class ContainerCommand:
    """A command to run in a container, with optional focus and exec options."""

    cmd: list[str] = field(default_factory=list)
    enable_focus: bool = False
    container_cmd_options: dict[str, Any] = field(default_factory=dict)