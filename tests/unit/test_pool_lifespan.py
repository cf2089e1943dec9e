"""Unit tests for PoolLifespanMiddleware."""

import asyncio
import time

from authzman.interfaces.api.middleware.pool_lifespan import PoolLifespanMiddleware


class SlowPool:
    """Pool whose open/close block the calling thread."""

    max_size = 4

    def __init__(self, delay: float = 0.3) -> None:
        self.delay = delay
        self.opened = False
        self.closed = False
        self.open_kwargs: dict = {}

    def open(self, wait: bool = False, timeout: float = 30.0) -> None:
        time.sleep(self.delay)
        self.open_kwargs = {"wait": wait, "timeout": timeout}
        self.opened = True

    def close(self) -> None:
        time.sleep(self.delay)
        self.closed = True


async def _count_ticks_during(coro) -> int:
    ticks = 0
    done = False

    async def ticker() -> None:
        nonlocal ticks
        while not done:
            await asyncio.sleep(0.05)
            ticks += 1

    task = asyncio.create_task(ticker())
    await coro
    done = True
    await task
    return ticks


def test_startup_opens_pool_without_blocking_loop() -> None:
    pool = SlowPool()
    middleware = PoolLifespanMiddleware(pool, open_timeout=5.0)

    ticks = asyncio.run(_count_ticks_during(middleware.process_startup({}, {})))

    assert pool.opened
    assert pool.open_kwargs == {"wait": True, "timeout": 5.0}
    assert ticks > 0


def test_shutdown_closes_pool_without_blocking_loop() -> None:
    pool = SlowPool()
    middleware = PoolLifespanMiddleware(pool)

    ticks = asyncio.run(_count_ticks_during(middleware.process_shutdown({}, {})))

    assert pool.closed
    assert ticks > 0
