"""Configuration store port - durable storage for roles and privileges."""

from typing import Protocol

from authzman.domain.records import PrivilegeRecord, RoleRecord


class ConfigurationStore(Protocol):
    """Port for role and privilege persistence.

    ``create_*`` and ``update_*`` may assign ``id`` and ``version`` on the
    record passed in. Reads, updates and deletes of unknown ids raise
    ``RoleNotFound`` / ``PrivilegeNotFound``.
    """

    def ping(self) -> None:
        """Raise when the store cannot serve requests."""
        ...

    def list_roles(self) -> list[RoleRecord]: ...

    def read_role(self, role_id: str) -> RoleRecord: ...

    def create_role(self, role: RoleRecord) -> None: ...

    def update_role(self, role: RoleRecord) -> None: ...

    def delete_role(self, role_id: str) -> None: ...

    def list_privileges(self) -> list[PrivilegeRecord]: ...

    def read_privilege(self, privilege_id: str) -> PrivilegeRecord: ...

    def create_privilege(self, privilege: PrivilegeRecord) -> None: ...

    def update_privilege(self, privilege: PrivilegeRecord) -> None: ...

    def delete_privilege(self, privilege_id: str) -> None: ...
