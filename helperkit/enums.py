"""Enum helpers with table-based metadata.

Metadata (display order, description, alias, arbitrary named data) is attached
to enum members through an explicit registration table built once per enum
class:

    @enum_info({
        "LOW": EnumInfo(order=2, description="Low priority"),
        "HIGH": EnumInfo(order=1, data={"colour": "red"}),
    })
    class Priority(Enum):
        LOW = 1
        HIGH = 2

Lookups index that table; nothing inspects the class at lookup time.
"""

from __future__ import annotations

import sys
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, TypeVar

TEnum = TypeVar("TEnum", bound=Enum)

UNORDERED = sys.maxsize


@dataclass(frozen=True)
class EnumInfo:
    order: int | None = None
    description: str | None = None
    alias: str | None = None
    data: Mapping[str, Any] = field(default_factory=dict)


_INFO: dict[type[Enum], Mapping[Enum, EnumInfo]] = {}
_ORDER: dict[type[Enum], Mapping[Enum, int]] = {}


def _resolve_member(enum_cls: type[TEnum], key: TEnum | str) -> TEnum:
    if isinstance(key, enum_cls):
        return key
    if isinstance(key, str) and key in enum_cls.__members__:
        return enum_cls.__members__[key]
    raise ValueError(f"{key!r} is not a member of {enum_cls.__name__}")


def _build_order(enum_cls: type[Enum], table: Mapping[Enum, EnumInfo]) -> Mapping[Enum, int]:
    # Unordered members count down from UNORDERED - 1 in reverse declaration
    # order, so they sort after every explicit order and keep declaration order.
    orders: dict[Enum, int] = {}
    unordered = UNORDERED - 1
    for member in reversed(list(enum_cls)):
        info = table.get(member)
        if info is not None and info.order is not None:
            orders[member] = info.order
        else:
            orders[member] = unordered
            unordered -= 1
    return MappingProxyType(orders)


def register_enum_info(
    enum_cls: type[TEnum],
    table: Mapping[TEnum | str, EnumInfo],
) -> type[TEnum]:
    """Attach metadata to `enum_cls`; keys may be members or member names."""
    if not (isinstance(enum_cls, type) and issubclass(enum_cls, Enum)):
        raise TypeError(f"expected an Enum class, got: {enum_cls!r}")
    resolved: dict[Enum, EnumInfo] = {}
    for key, info in table.items():
        if not isinstance(info, EnumInfo):
            raise TypeError(f"metadata for {key!r} must be EnumInfo, got: {type(info).__name__}")
        resolved[_resolve_member(enum_cls, key)] = info
    frozen = MappingProxyType(resolved)
    _INFO[enum_cls] = frozen
    _ORDER[enum_cls] = _build_order(enum_cls, frozen)
    return enum_cls


def enum_info(table: Mapping[str, EnumInfo]) -> Callable[[type[TEnum]], type[TEnum]]:
    """Class decorator form of `register_enum_info`, keyed by member name."""

    def _decorate(enum_cls: type[TEnum]) -> type[TEnum]:
        return register_enum_info(enum_cls, table)

    return _decorate


# region Metadata lookups
def get_info(member: Enum) -> EnumInfo | None:
    return _INFO.get(type(member), {}).get(member)


def get_description(member: Enum) -> str | None:
    info = get_info(member)
    return info.description if info is not None else None


def get_alias(member: Enum) -> str | None:
    info = get_info(member)
    return info.alias if info is not None else None


def get_data(member: Enum, name: str) -> Any:
    info = get_info(member)
    if info is None:
        return None
    return info.data.get(name)


def get_order(member: Enum) -> int:
    """Explicit order when registered, otherwise a large value that keeps declaration order."""
    enum_cls = type(member)
    orders = _ORDER.get(enum_cls)
    if orders is None:
        orders = _build_order(enum_cls, {})
        _ORDER[enum_cls] = orders
    return orders.get(member, UNORDERED)
# endregion


# region Values / parsing / flags
def get_values(enum_cls: type[TEnum]) -> list[TEnum]:
    return list(enum_cls)


def to_value_string(member: Enum) -> str:
    value = member.value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(int(value))
    return str(value)


def add_flag(value: TEnum, flag: TEnum) -> TEnum:
    try:
        return value | flag
    except TypeError as exc:
        raise ValueError(
            f"could not append flag value {flag!r} to enum {type(value).__name__}"
        ) from exc


def remove_flag(value: TEnum, flag: TEnum) -> TEnum:
    try:
        return value & ~flag
    except TypeError as exc:
        raise ValueError(
            f"could not remove flag value {flag!r} from enum {type(value).__name__}"
        ) from exc


def parse(enum_cls: type[TEnum], name: str, *, ignore_case: bool = False) -> TEnum:
    """Member by name; a string of digits is looked up by value instead."""
    token = str(name).strip()
    if token.lstrip("-").isdigit():
        try:
            return enum_cls(int(token))
        except ValueError:
            raise ValueError(f"{name!r} is not a valid {enum_cls.__name__} value") from None
    if token in enum_cls.__members__:
        return enum_cls.__members__[token]
    if ignore_case:
        folded = token.casefold()
        for key, member in enum_cls.__members__.items():
            if key.casefold() == folded:
                return member
    raise ValueError(f"{name!r} is not a valid {enum_cls.__name__} name")


def match(member: Enum, name: str) -> bool:
    return parse(type(member), name) is member
# endregion
