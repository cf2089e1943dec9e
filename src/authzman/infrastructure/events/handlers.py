"""Change event handlers."""

import structlog

from authzman.domain.events import AuthorizationConfigurationChanged

logger = structlog.get_logger(__name__)


def log_configuration_changed(event: AuthorizationConfigurationChanged) -> None:
    """Log every authorization configuration change."""
    logger.info(
        "authorization_configuration_changed",
        event_id=str(event.event_id),
        occurred_at=event.occurred_at.isoformat(),
    )
