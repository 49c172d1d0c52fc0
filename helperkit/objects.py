"""Object conversion helpers: dict/namespace views, nullable coercion, URL-safe tokens."""

from __future__ import annotations

import base64
import binascii
import dataclasses
import uuid
from collections.abc import Mapping
from types import SimpleNamespace
from typing import Any, TypeVar

T = TypeVar("T")


def to_dictionary(value: object) -> dict[str, Any]:
    """Shallow name -> value mapping of a dataclass, mapping, or plain object."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
    if isinstance(value, Mapping):
        return {str(k): v for k, v in value.items()}
    attrs = getattr(value, "__dict__", None)
    if attrs is None:
        raise TypeError(f"cannot build a dictionary from {type(value).__name__}")
    return {k: v for k, v in attrs.items() if not k.startswith("_")}


def to_namespace(value: object) -> SimpleNamespace:
    if isinstance(value, SimpleNamespace):
        return value
    return SimpleNamespace(**to_dictionary(value))


def to_nullable(value: object | None, target_type: type[T]) -> T | None:
    if value is None:
        return None
    if isinstance(value, target_type):
        return value
    return target_type(value)


# region Bytes
def to_bytes(value: str | bytes | uuid.UUID | None) -> bytes | None:
    """UTF-8 for text; UUIDs use the mixed-endian `bytes_le` layout of .NET GUIDs."""
    if value is None:
        return None
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, uuid.UUID):
        return value.bytes_le
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    raise TypeError(f"unsupported type for byte conversion: {type(value).__name__}")


def from_bytes(data: bytes | None, target_type: type[T]) -> T | None:
    if not data:
        return None
    if target_type is str:
        return data.decode("utf-8")
    if target_type is uuid.UUID:
        return uuid.UUID(bytes_le=bytes(data))
    if target_type is bytes:
        return bytes(data)
    raise TypeError(f"unsupported target type for byte conversion: {target_type.__name__}")
# endregion


# region URL-safe tokens
def url_safe_encode(value: str | bytes | uuid.UUID | None) -> str | None:
    """URL-safe base64 ('-' and '_' alphabet) with the '=' padding stripped."""
    raw = to_bytes(value)
    if raw is None:
        return None
    return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")


def url_safe_decode(text: str | None, target_type: type[T] = str) -> T | None:
    """Inverse of `url_safe_encode`; malformed tokens decode to None."""
    if not text:
        return None
    padded = text + "=" * (-len(text) % 4)
    try:
        raw = base64.urlsafe_b64decode(padded.encode("ascii"))
        return from_bytes(raw, target_type)
    except (binascii.Error, UnicodeError, ValueError):
        return None
# endregion
