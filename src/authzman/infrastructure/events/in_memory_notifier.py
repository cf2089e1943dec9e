"""In-memory change notifier - synchronous observer list."""

from collections.abc import Callable

import structlog

from authzman.domain.events import AuthorizationConfigurationChanged

ChangeHandler = Callable[[AuthorizationConfigurationChanged], None]

logger = structlog.get_logger(__name__)


class InMemoryChangeNotifier:
    """Delivers change events to subscribed handlers in subscription order.

    Delivery happens on the publishing thread; publish returns once every
    handler has returned. A handler exception is logged and re-raised, so
    handlers subscribed after the failing one are not called.
    """

    def __init__(self) -> None:
        self._handlers: list[ChangeHandler] = []

    def subscribe(self, handler: ChangeHandler) -> None:
        """Register handler. The same handler may be registered twice."""
        self._handlers.append(handler)

    def unsubscribe(self, handler: ChangeHandler) -> None:
        """Remove first registration of handler. Raises ValueError if absent."""
        self._handlers.remove(handler)

    @property
    def handler_count(self) -> int:
        return len(self._handlers)

    def publish(self, event: AuthorizationConfigurationChanged) -> None:
        handlers = list(self._handlers)
        if not handlers:
            return

        logger.debug(
            "event_publishing",
            event_type=type(event).__name__,
            event_id=str(event.event_id),
            handler_count=len(handlers),
        )
        for handler in handlers:
            try:
                handler(event)
            except Exception as e:
                logger.error(
                    "event_handler_failed",
                    event_type=type(event).__name__,
                    event_id=str(event.event_id),
                    handler=getattr(handler, "__name__", repr(handler)),
                    error_type=type(e).__name__,
                    error_message=str(e),
                )
                raise
