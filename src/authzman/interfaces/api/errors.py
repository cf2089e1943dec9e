"""Map domain exceptions to HTTP responses."""

import falcon
import falcon.asgi
import structlog

from authzman.domain.exceptions import (
    ConcurrentModification,
    DuplicateRecord,
    NotFound,
    ValidationError,
)

logger = structlog.get_logger(__name__)


async def _not_found(req, resp, ex: NotFound, params) -> None:
    resp.status = falcon.HTTP_404
    resp.media = {"error": str(ex)}


async def _conflict(req, resp, ex: Exception, params) -> None:
    resp.status = falcon.HTTP_409
    resp.media = {"error": str(ex)}


async def _bad_request(req, resp, ex: ValidationError, params) -> None:
    resp.status = falcon.HTTP_400
    resp.media = {"error": str(ex)}


async def _internal_error(req, resp, ex: Exception, params) -> None:
    logger.error(
        "unhandled_exception",
        method=req.method,
        path=req.path,
        error_type=type(ex).__name__,
        error_message=str(ex),
        exc_info=ex,
    )
    resp.status = falcon.HTTP_500
    resp.media = {"title": "500 Internal Server Error"}


def register_error_handlers(app: falcon.asgi.App) -> None:
    """Install handlers; the most specific exception class wins."""
    app.add_error_handler(Exception, _internal_error)
    app.add_error_handler(NotFound, _not_found)
    app.add_error_handler(DuplicateRecord, _conflict)
    app.add_error_handler(ConcurrentModification, _conflict)
    app.add_error_handler(ValidationError, _bad_request)
