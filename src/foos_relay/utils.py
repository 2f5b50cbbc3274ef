"""Miscellaneous helpers."""

from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator


class ThreadProcessingGuard:
    """Serialize handling of messages that belong to the same thread.

    A thread's lock is dropped once nobody holds or waits for it, so the
    registry only covers threads with messages in flight.
    """

    def __init__(self) -> None:
        self._locks: dict[str, asyncio.Lock] = {}
        self._users: dict[str, int] = {}

    def __len__(self) -> int:
        return len(self._locks)

    @asynccontextmanager
    async def lock(self, thread_id: str) -> AsyncIterator[None]:
        lock = self._locks.get(thread_id)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[thread_id] = lock
        self._users[thread_id] = self._users.get(thread_id, 0) + 1
        try:
            async with lock:
                yield
        finally:
            remaining = self._users[thread_id] - 1
            if remaining:
                self._users[thread_id] = remaining
            else:
                del self._users[thread_id]
                del self._locks[thread_id]


def snowflake_value(value: str | int) -> int:
    """Return a Discord snowflake as an integer for numeric comparison.

    Raises ``ValueError`` for values that are not non-negative integers.
    """

    text = str(value).strip()
    if not text.isdigit():
        raise ValueError(f"Invalid snowflake: {value!r}")
    return int(text)
