from __future__ import annotations

import io
from typing import BinaryIO, Protocol


class _AsyncReader(Protocol):
    async def read(self, n: int = -1) -> bytes: ...


def read_to_byte_array(stream: BinaryIO | None) -> bytes | None:
    """Remaining bytes of `stream`; a BytesIO returns its whole buffer."""
    if stream is None:
        return None
    if isinstance(stream, io.BytesIO):
        return stream.getvalue()
    return stream.read()


async def read_to_byte_array_async(reader: _AsyncReader | None) -> bytes | None:
    if reader is None:
        return None
    return await reader.read()


def read_to_string(
    stream: BinaryIO | None,
    encoding: str = "utf-8",
    leave_open: bool = False,
) -> str | None:
    """Decode the rest of `stream`, closing it afterwards unless `leave_open`."""
    if stream is None:
        return None
    try:
        return stream.read().decode(encoding)
    finally:
        if not leave_open:
            stream.close()
