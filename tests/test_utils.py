from __future__ import annotations

import asyncio

import pytest

from foos_relay.utils import ThreadProcessingGuard, snowflake_value


def test_snowflake_value_parses_large_ids() -> None:
    assert snowflake_value(" 1234567890123456789012 ") == 1234567890123456789012
    assert snowflake_value(0) == 0


def test_snowflake_value_rejects_garbage() -> None:
    with pytest.raises(ValueError):
        snowflake_value("-5")
    with pytest.raises(ValueError):
        snowflake_value("12a")


def test_thread_guard_serializes_same_thread() -> None:
    guard = ThreadProcessingGuard()
    events: list[str] = []

    async def worker(name: str, thread_id: str) -> None:
        async with guard.lock(thread_id):
            events.append(f"{name}-start")
            await asyncio.sleep(0.01)
            events.append(f"{name}-end")

    async def runner() -> None:
        await asyncio.gather(worker("a", "1"), worker("b", "1"))

    asyncio.run(runner())

    assert events == ["a-start", "a-end", "b-start", "b-end"]


def test_thread_guard_drops_idle_locks() -> None:
    guard = ThreadProcessingGuard()
    sizes: list[int] = []

    async def worker(thread_id: str) -> None:
        async with guard.lock(thread_id):
            sizes.append(len(guard))
            await asyncio.sleep(0.01)

    async def runner() -> None:
        await asyncio.gather(worker("1"), worker("1"), worker("2"))

    asyncio.run(runner())

    assert max(sizes) == 2
    assert len(guard) == 0
