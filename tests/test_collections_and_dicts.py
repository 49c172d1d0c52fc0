from __future__ import annotations

from dataclasses import dataclass

import pytest

from helperkit.collections_utils import (
    add_or_update,
    as_read_only,
    empty_array,
    left_outer_join,
    right_outer_join,
)
from helperkit.dicts import add_or_skip_if_exists, has_value, merge


@dataclass(frozen=True)
class _Person:
    id: int
    name: str


@dataclass(frozen=True)
class _Colour:
    id: int
    description: str


def _people() -> list[_Person]:
    return [_Person(1, "Bob"), _Person(2, "Jim"), _Person(3, "Sam"), _Person(4, "Sue")]


def _colours() -> list[_Colour]:
    return [_Colour(1, "Blue"), _Colour(2, "Red"), _Colour(3, "Orange"), _Colour(5, "Black")]


def test_add_or_update_appends_missing_key() -> None:
    items = [(1, 1), (2, 2), (3, 3)]
    add_or_update(items, (4, 4), key=lambda kv: kv[0])
    assert items == [(1, 1), (2, 2), (3, 3), (4, 4)]


def test_add_or_update_replaces_in_place() -> None:
    items = [(1, 1), (2, 2), (3, 3)]
    add_or_update(items, (3, 4), key=lambda kv: kv[0])
    assert items == [(1, 1), (2, 2), (3, 4)]
    assert (3, 3) not in items


def test_add_or_update_rejects_none() -> None:
    with pytest.raises(ValueError):
        add_or_update([], None, key=lambda x: x)


def test_read_only_views() -> None:
    assert as_read_only([1, 2]) == (1, 2)
    assert as_read_only(x for x in "ab") == ("a", "b")
    assert empty_array() == ()
    assert empty_array() is empty_array()


def test_left_outer_join_keeps_every_outer_item() -> None:
    rows = left_outer_join(
        _people(),
        _colours(),
        lambda p: p.id,
        lambda c: c.id,
        lambda p, c: (p.id, p.name, c.description if c else None),
    )
    assert len(rows) == 4
    assert rows[0] == (1, "Bob", "Blue")
    assert rows[-1] == (4, "Sue", None)


def test_right_outer_join_keeps_every_inner_item() -> None:
    rows = right_outer_join(
        _people(),
        _colours(),
        lambda p: p.id,
        lambda c: c.id,
        lambda p, c: (c.id, p.name if p else None, c.description),
    )
    assert len(rows) == 4
    assert rows[0] == (1, "Bob", "Blue")
    assert rows[-1] == (5, None, "Black")


def test_join_emits_one_row_per_match() -> None:
    rows = left_outer_join(
        [_Person(1, "Bob")],
        [_Colour(1, "Blue"), _Colour(1, "Teal")],
        lambda p: p.id,
        lambda c: c.id,
        lambda p, c: c.description,
    )
    assert rows == ["Blue", "Teal"]


def test_has_value() -> None:
    names = {1: "Jim", 2: "Jane", 3: "Fred"}
    assert has_value(names, 1, "Jim")
    assert has_value(names, 2, "Jane")
    assert has_value(names, 3, "Fred")
    assert not has_value(names, 2, "Jim")
    assert not has_value(names, 1, "Jane")
    assert not has_value(names, -(2**31), None)
    assert not has_value(names, 1, None)


def test_has_value_stored_none_matches_none_or_empty() -> None:
    values = {"a": None}
    assert has_value(values, "a", None)
    assert has_value(values, "a", "")
    assert not has_value(values, "a", "x")


def test_add_or_skip_if_exists() -> None:
    values = {"a": 1}
    assert not add_or_skip_if_exists(values, "a", 2)
    assert add_or_skip_if_exists(values, "b", 3)
    assert values == {"a": 1, "b": 3}


def test_merge() -> None:
    base = {"a": 1, "b": 2}
    out = merge(base, {"b": 20, "c": 30})
    assert out is base
    assert base == {"a": 1, "b": 2, "c": 30}
    merge(base, {"b": 200}, overwrite=True)
    assert base["b"] == 200
