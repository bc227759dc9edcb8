"""Type-checked conversion of loosely typed values."""

from __future__ import annotations

from typing import Any, TypeVar

T = TypeVar("T")


def to_any_type(value: Any, target_type: type[T]) -> T | None:
    """Return ``value`` if it is an instance of ``target_type``, otherwise ``None``."""
    if value is None:
        return None
    if isinstance(value, target_type):
        return value
    return None