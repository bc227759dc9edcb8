"""Merging of several string sequences into one list."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import chain


def merge_slices(*args: Iterable[str] | None) -> list[str]:
    """Concatenate the given sequences in order, skipping any that are ``None``."""
    return list(chain.from_iterable(seq for seq in args if seq is not None))