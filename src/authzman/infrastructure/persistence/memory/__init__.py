"""In-memory persistence."""

from authzman.infrastructure.persistence.memory.configuration_store import (
    InMemoryConfigurationStore,
)

__all__ = ["InMemoryConfigurationStore"]
