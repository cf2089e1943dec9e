"""Methods granted by method-type privileges."""

from enum import StrEnum


class PrivilegeMethod(StrEnum):
    """Standard methods; method privileges may also carry custom names."""

    CREATE = "create"
    READ = "read"
    UPDATE = "update"
    DELETE = "delete"


# Privilege property holding the comma-joined methods of a method privilege
METHOD_PROPERTY = "method"
