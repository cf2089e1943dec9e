"""Domain entities."""

from authzman.domain.entities.privilege import Privilege
from authzman.domain.entities.role import Role

__all__ = [
    "Privilege",
    "Role",
]
