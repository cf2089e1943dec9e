"""Domain exceptions."""


class AuthzManError(Exception):
    """Base exception for authzman."""

    pass


class NotFound(AuthzManError):
    """Requested resource was not found."""

    def __init__(self, resource: str, identifier: str) -> None:
        super().__init__(resource, identifier)
        self.resource = resource
        self.identifier = identifier

    def __str__(self) -> str:
        return f"{self.resource} not found: {self.identifier}"


class RoleNotFound(NotFound):
    """Role id does not exist in the configuration store."""

    def __init__(self, role_id: str) -> None:
        super().__init__("Role", role_id)


class PrivilegeNotFound(NotFound):
    """Privilege id does not exist in the configuration store."""

    def __init__(self, privilege_id: str) -> None:
        super().__init__("Privilege", privilege_id)


class DuplicateRecord(AuthzManError):
    """Record with the same id already exists in the store."""

    pass


class ConcurrentModification(AuthzManError):
    """Record version does not match the stored version."""

    pass


class ValidationError(AuthzManError):
    """Validation failed for input data."""

    pass
