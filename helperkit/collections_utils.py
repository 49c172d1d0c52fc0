from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable
from typing import Any, TypeVar

T = TypeVar("T")
TInner = TypeVar("TInner")
TResult = TypeVar("TResult")

_EMPTY: tuple = ()


def as_read_only(items: Iterable[T]) -> tuple[T, ...]:
    return tuple(items)


def empty_array() -> tuple:
    return _EMPTY


def add_or_update(items: list[T], item: T, key: Callable[[T], Any]) -> None:
    """Replace the first element whose key equals `key(item)`, else append `item`."""
    if item is None:
        raise ValueError("item is None")
    item_key = key(item)
    for idx, existing in enumerate(items):
        if key(existing) == item_key:
            items[idx] = item
            return
    items.append(item)


def _group_by(items: Iterable[TInner], key: Callable[[TInner], Hashable]) -> dict[Hashable, list[TInner]]:
    groups: dict[Hashable, list[TInner]] = {}
    for item in items:
        groups.setdefault(key(item), []).append(item)
    return groups


def left_outer_join(
    outer: Iterable[T],
    inner: Iterable[TInner],
    outer_key: Callable[[T], Hashable],
    inner_key: Callable[[TInner], Hashable],
    result: Callable[[T, TInner | None], TResult],
) -> list[TResult]:
    """Every `outer` item paired with each matching `inner` item, or with None."""
    lookup = _group_by(inner, inner_key)
    out: list[TResult] = []
    for left in outer:
        matches = lookup.get(outer_key(left))
        if not matches:
            out.append(result(left, None))
            continue
        for right in matches:
            out.append(result(left, right))
    return out


def right_outer_join(
    outer: Iterable[T],
    inner: Iterable[TInner],
    outer_key: Callable[[T], Hashable],
    inner_key: Callable[[TInner], Hashable],
    result: Callable[[T | None, TInner], TResult],
) -> list[TResult]:
    """Every `inner` item paired with each matching `outer` item, or with None."""
    lookup = _group_by(outer, outer_key)
    out: list[TResult] = []
    for right in inner:
        matches = lookup.get(inner_key(right))
        if not matches:
            out.append(result(None, right))
            continue
        for left in matches:
            out.append(result(left, right))
    return out
