"""Defaults and validation for container working directories."""

from __future__ import annotations

from pathlib import PurePosixPath

from daggerkit.fixtures import MNT_PREFIX


def get_default() -> str:
    """Return the default mount prefix."""
    return MNT_PREFIX


def set_or_default(workdir: str) -> str:
    """Return ``workdir`` made absolute, or the default when it is empty."""
    if not workdir:
        return get_default()
    if not workdir.startswith("/"):
        workdir = "/" + workdir
    return workdir


def is_valid(workdir: str) -> None:
    """Raise ``ValueError`` unless ``workdir`` is absolute and under the mount prefix."""
    if not PurePosixPath(workdir).is_absolute():
        raise ValueError(f"workdir must be an absolute path: {workdir}")
    if not workdir.startswith(MNT_PREFIX):
        raise ValueError(f"workdir must start with {MNT_PREFIX}: {workdir}")