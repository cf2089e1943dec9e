"""Change notifier port - broadcast of configuration change events."""

from typing import Protocol

from authzman.domain.events import AuthorizationConfigurationChanged


class ChangeNotifier(Protocol):
    """Port for publishing authorization configuration changes."""

    def publish(self, event: AuthorizationConfigurationChanged) -> None: ...
