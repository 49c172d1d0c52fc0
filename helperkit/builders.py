"""Chainable helpers over an `io.StringIO` text buffer.

Callbacks receive the buffer and write to it; their return values are ignored
and every helper returns the buffer itself.
"""

from __future__ import annotations

import io
from collections.abc import Callable, Iterable
from typing import Any, TypeVar

T = TypeVar("T")

LINE_END = "\r\n"


def append_formatted_line(buf: io.StringIO, fmt: str, *args: object) -> io.StringIO:
    buf.write(fmt.format(*args))
    buf.write(LINE_END)
    return buf


def append_when(
    buf: io.StringIO,
    predicate: Callable[[], bool],
    fn: Callable[[io.StringIO], Any],
) -> io.StringIO:
    if predicate():
        fn(buf)
    return buf


def append_sequence(
    buf: io.StringIO,
    sequence: Iterable[T],
    fn: Callable[[io.StringIO, T], Any],
) -> io.StringIO:
    for item in sequence:
        fn(buf, item)
    return buf
