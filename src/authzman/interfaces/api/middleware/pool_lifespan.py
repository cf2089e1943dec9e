"""Pool lifespan middleware - Postgres pool follows the ASGI lifespan."""

import asyncio
from typing import Any

import structlog
from psycopg_pool import ConnectionPool

logger = structlog.get_logger(__name__)


class PoolLifespanMiddleware:
    """Opens the configuration store pool on startup, closes it on shutdown.

    The pool is synchronous, so open/close run in a worker thread and the
    event loop keeps serving while the pool warms up or drains.
    """

    def __init__(self, pool: ConnectionPool, open_timeout: float = 30.0) -> None:
        self._pool = pool
        self._open_timeout = open_timeout

    async def process_startup(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        # wait so the first request does not race pool warm-up
        await asyncio.to_thread(self._pool.open, wait=True, timeout=self._open_timeout)
        logger.info("store_pool_opened", max_size=self._pool.max_size)

    async def process_shutdown(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        await asyncio.to_thread(self._pool.close)
        logger.info("store_pool_closed")
