"""Fire-and-forget scheduling for coroutines."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable
from typing import Any


def forget(awaitable: Awaitable[Any], *acceptable_exceptions: type[BaseException]) -> asyncio.Future:
    """Schedule `awaitable` on the running loop without awaiting it.

    Exceptions of an `acceptable_exceptions` type are dropped; any other
    failure goes to the loop's exception handler instead of being lost with
    the unreferenced task.
    """
    loop = asyncio.get_running_loop()
    task = asyncio.ensure_future(awaitable, loop=loop)

    def _on_done(fut: asyncio.Future) -> None:
        if fut.cancelled():
            return
        exc = fut.exception()
        if exc is None or isinstance(exc, acceptable_exceptions):
            return
        loop.call_exception_handler(
            {
                "message": "forgotten task raised an exception",
                "exception": exc,
                "future": fut,
            }
        )

    task.add_done_callback(_on_done)
    return task
