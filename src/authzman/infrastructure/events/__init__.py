"""Change notification adapters."""

from authzman.infrastructure.events.handlers import log_configuration_changed
from authzman.infrastructure.events.in_memory_notifier import (
    ChangeHandler,
    InMemoryChangeNotifier,
)

__all__ = [
    "ChangeHandler",
    "InMemoryChangeNotifier",
    "log_configuration_changed",
]
