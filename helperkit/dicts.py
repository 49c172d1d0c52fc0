"""Mutable-mapping helpers. Functions that mutate say so and return the mapping."""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import TypeVar

K = TypeVar("K")
V = TypeVar("V")


def add_or_skip_if_exists(mapping: MutableMapping[K, V], key: K, value: V) -> bool:
    """Insert `key` only when absent; return whether it was inserted."""
    if key in mapping:
        return False
    mapping[key] = value
    return True


def merge(
    mapping: MutableMapping[K, V],
    other: Mapping[K, V],
    overwrite: bool = False,
) -> MutableMapping[K, V]:
    for key, value in other.items():
        if key not in mapping or overwrite:
            mapping[key] = value
    return mapping


def has_value(mapping: Mapping[K, V], key: K, value: object) -> bool:
    """True when `key` is present and holds `value`.

    A stored `None` matches both `None` and the empty string.
    """
    if key not in mapping:
        return False
    stored = mapping[key]
    if stored is None:
        return value is None or value == ""
    return stored == value
