"""Domain value objects."""

from authzman.domain.value_objects.privilege_method import METHOD_PROPERTY, PrivilegeMethod

__all__ = [
    "METHOD_PROPERTY",
    "PrivilegeMethod",
]
