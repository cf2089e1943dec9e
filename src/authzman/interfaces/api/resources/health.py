"""Liveness and readiness endpoints."""

import asyncio

import falcon
import falcon.asgi
import structlog

from authzman.application.ports import ConfigurationStore

logger = structlog.get_logger(__name__)


class HealthResource:
    """GET /v1/health and /v1/health/ready.

    Liveness only proves the process answers; readiness pings the
    configuration store and reports 503 while it is unreachable.
    """

    def __init__(self, store: ConfigurationStore) -> None:
        self._store = store

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        resp.media = {"status": "ok"}
        resp.status = falcon.HTTP_200

    async def on_get_ready(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        try:
            await asyncio.to_thread(self._store.ping)
        except Exception as e:
            logger.warning(
                "store_not_ready",
                error_type=type(e).__name__,
                error_message=str(e),
            )
            resp.media = {"status": "unavailable", "error": "configuration store unreachable"}
            resp.status = falcon.HTTP_503
            return
        resp.media = {"status": "ready"}
        resp.status = falcon.HTTP_200
