from __future__ import annotations


def to_hex_string(data: bytes | bytearray | None) -> str | None:
    """Upper-case hex rendering, two digits per byte."""
    if data is None:
        return None
    return bytes(data).hex().upper()


def decode(data: bytes | bytearray, encoding: str = "utf-8") -> str:
    return bytes(data).decode(encoding)
