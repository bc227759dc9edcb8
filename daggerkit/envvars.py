"""Conversion of environment variables from strings, mappings and lists."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from daggerkit.models import DaggerEnvVars


def to_dagger_env_vars_from_str(env_vars: str) -> list[DaggerEnvVars]:
    """Parse a comma-separated list of ``KEY=value`` pairs."""
    if not env_vars:
        raise ValueError("input string is empty")
    return to_dagger_env_vars_from_slice(env_vars.split(","))


def to_dagger_env_vars_from_map(env_vars_map: Mapping[str, str]) -> list[DaggerEnvVars]:
    """Turn a mapping of names to values into environment variables."""
    if not env_vars_map:
        raise ValueError("input map is empty")
    result = []
    for key, value in env_vars_map.items():
        if not key:
            raise ValueError("found empty key in map")
        result.append(DaggerEnvVars(name=key, value=value))
    return result


def to_dagger_env_vars_from_slice(env_vars_slice: Sequence[str]) -> list[DaggerEnvVars]:
    """Parse ``KEY=value`` strings, skipping empty entries."""
    if not env_vars_slice:
        raise ValueError("input slice is empty")
    result = []
    for entry in env_vars_slice:
        if not entry:
            continue
        key, sep, value = entry.partition("=")
        if not sep:
            raise ValueError(f"invalid environment variable format: {entry}")
        key, value = key.strip(), value.strip()
        if not key:
            raise ValueError(f"empty key in environment variable: {entry}")
        result.append(DaggerEnvVars(name=key, value=value))
    return result