"""PostgreSQL persistence."""

from authzman.infrastructure.persistence.postgres.configuration_store import (
    PostgresConfigurationStore,
)
from authzman.infrastructure.persistence.postgres.connection import create_pool

__all__ = ["PostgresConfigurationStore", "create_pool"]
