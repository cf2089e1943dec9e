"""In-memory configuration store."""

import threading
from dataclasses import replace
from uuid import uuid4

from authzman.domain.exceptions import DuplicateRecord, PrivilegeNotFound, RoleNotFound
from authzman.domain.records import PrivilegeRecord, RoleRecord
from authzman.infrastructure.persistence.versioning import (
    INITIAL_VERSION,
    check_version,
    next_version,
)


def _copy_role(role: RoleRecord) -> RoleRecord:
    return replace(role, privileges=set(role.privileges), roles=set(role.roles))


def _copy_privilege(privilege: PrivilegeRecord) -> PrivilegeRecord:
    return replace(privilege, properties=dict(privilege.properties))


class InMemoryConfigurationStore:
    """Thread-safe dict-backed store. Records are copied in and out."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._roles: dict[str, RoleRecord] = {}
        self._privileges: dict[str, PrivilegeRecord] = {}

    def ping(self) -> None:
        pass

    # --- Roles ---

    def list_roles(self) -> list[RoleRecord]:
        with self._lock:
            return [_copy_role(r) for r in self._roles.values()]

    def read_role(self, role_id: str) -> RoleRecord:
        with self._lock:
            role = self._roles.get(role_id)
            if role is None:
                raise RoleNotFound(role_id)
            return _copy_role(role)

    def create_role(self, role: RoleRecord) -> None:
        with self._lock:
            if not role.id:
                role.id = uuid4().hex
            if role.id in self._roles:
                raise DuplicateRecord(f"Role already exists: {role.id}")
            role.version = INITIAL_VERSION
            self._roles[role.id] = _copy_role(role)

    def update_role(self, role: RoleRecord) -> None:
        with self._lock:
            stored = self._roles.get(role.id)
            if stored is None:
                raise RoleNotFound(role.id)
            check_version("Role", role.id, role.version, stored.version)
            role.version = next_version(stored.version)
            self._roles[role.id] = _copy_role(role)

    def delete_role(self, role_id: str) -> None:
        with self._lock:
            if self._roles.pop(role_id, None) is None:
                raise RoleNotFound(role_id)

    # --- Privileges ---

    def list_privileges(self) -> list[PrivilegeRecord]:
        with self._lock:
            return [_copy_privilege(p) for p in self._privileges.values()]

    def read_privilege(self, privilege_id: str) -> PrivilegeRecord:
        with self._lock:
            privilege = self._privileges.get(privilege_id)
            if privilege is None:
                raise PrivilegeNotFound(privilege_id)
            return _copy_privilege(privilege)

    def create_privilege(self, privilege: PrivilegeRecord) -> None:
        with self._lock:
            if not privilege.id:
                privilege.id = uuid4().hex
            if privilege.id in self._privileges:
                raise DuplicateRecord(f"Privilege already exists: {privilege.id}")
            privilege.version = INITIAL_VERSION
            self._privileges[privilege.id] = _copy_privilege(privilege)

    def update_privilege(self, privilege: PrivilegeRecord) -> None:
        with self._lock:
            stored = self._privileges.get(privilege.id)
            if stored is None:
                raise PrivilegeNotFound(privilege.id)
            check_version("Privilege", privilege.id, privilege.version, stored.version)
            privilege.version = next_version(stored.version)
            self._privileges[privilege.id] = _copy_privilege(privilege)

    def delete_privilege(self, privilege_id: str) -> None:
        with self._lock:
            if self._privileges.pop(privilege_id, None) is None:
                raise PrivilegeNotFound(privilege_id)
