"""PostgreSQL configuration store implementation."""

from collections.abc import Sequence
from typing import Any
from uuid import uuid4

from psycopg.types.json import Jsonb
from psycopg_pool import ConnectionPool

from authzman.domain.exceptions import DuplicateRecord, PrivilegeNotFound, RoleNotFound
from authzman.domain.records import PrivilegeRecord, RoleRecord
from authzman.infrastructure.persistence.versioning import (
    INITIAL_VERSION,
    check_version,
    next_version,
)

_ROLE_COLUMNS = "id, version, name, description, read_only, privileges, roles"
_PRIVILEGE_COLUMNS = "id, version, name, description, read_only, type, properties"


def _role_from_row(r: Sequence[Any]) -> RoleRecord:
    return RoleRecord(
        id=r[0],
        version=r[1],
        name=r[2],
        description=r[3],
        read_only=bool(r[4]),
        privileges=set(r[5] or []),
        roles=set(r[6] or []),
    )


def _privilege_from_row(r: Sequence[Any]) -> PrivilegeRecord:
    return PrivilegeRecord(
        id=r[0],
        version=r[1],
        name=r[2],
        description=r[3],
        read_only=bool(r[4]),
        type=r[5],
        properties=dict(r[6] or {}),
    )


class PostgresConfigurationStore:
    """Configuration store on tables authz_role and authz_privilege.

    Each operation runs in its own pooled connection and transaction.
    """

    def __init__(self, pool: ConnectionPool) -> None:
        self._pool = pool

    def ping(self) -> None:
        """Round-trip one query through the pool."""
        with self._pool.connection() as conn:
            conn.execute("SELECT 1")

    # --- Roles ---

    def list_roles(self) -> list[RoleRecord]:
        """List all roles."""
        with self._pool.connection() as conn:
            rows = conn.execute(f"SELECT {_ROLE_COLUMNS} FROM authz_role").fetchall()
        return [_role_from_row(r) for r in rows]

    def read_role(self, role_id: str) -> RoleRecord:
        """Get role by id."""
        with self._pool.connection() as conn:
            r = conn.execute(
                f"SELECT {_ROLE_COLUMNS} FROM authz_role WHERE id = %s",
                (role_id,),
            ).fetchone()
        if not r:
            raise RoleNotFound(role_id)
        return _role_from_row(r)

    def create_role(self, role: RoleRecord) -> None:
        """Insert role, assigning id (when empty) and initial version."""
        role_id = role.id or uuid4().hex
        with self._pool.connection() as conn:
            cur = conn.execute(
                f"""
                INSERT INTO authz_role ({_ROLE_COLUMNS})
                VALUES (%s, %s, %s, %s, %s, %s, %s)
                ON CONFLICT (id) DO NOTHING
                """,
                (
                    role_id,
                    INITIAL_VERSION,
                    role.name,
                    role.description,
                    role.read_only,
                    sorted(role.privileges),
                    sorted(role.roles),
                ),
            )
            if cur.rowcount == 0:
                raise DuplicateRecord(f"Role already exists: {role_id}")
        role.id = role_id
        role.version = INITIAL_VERSION

    def update_role(self, role: RoleRecord) -> None:
        """Update role; bumps version."""
        with self._pool.connection() as conn:
            r = conn.execute(
                "SELECT version FROM authz_role WHERE id = %s FOR UPDATE",
                (role.id,),
            ).fetchone()
            if not r:
                raise RoleNotFound(role.id)
            check_version("Role", role.id, role.version, r[0])
            version = next_version(r[0])
            conn.execute(
                """
                UPDATE authz_role
                SET version = %s, name = %s, description = %s, read_only = %s,
                    privileges = %s, roles = %s
                WHERE id = %s
                """,
                (
                    version,
                    role.name,
                    role.description,
                    role.read_only,
                    sorted(role.privileges),
                    sorted(role.roles),
                    role.id,
                ),
            )
        role.version = version

    def delete_role(self, role_id: str) -> None:
        """Delete role by id."""
        with self._pool.connection() as conn:
            cur = conn.execute("DELETE FROM authz_role WHERE id = %s", (role_id,))
            if cur.rowcount == 0:
                raise RoleNotFound(role_id)

    # --- Privileges ---

    def list_privileges(self) -> list[PrivilegeRecord]:
        """List all privileges."""
        with self._pool.connection() as conn:
            rows = conn.execute(
                f"SELECT {_PRIVILEGE_COLUMNS} FROM authz_privilege"
            ).fetchall()
        return [_privilege_from_row(r) for r in rows]

    def read_privilege(self, privilege_id: str) -> PrivilegeRecord:
        """Get privilege by id."""
        with self._pool.connection() as conn:
            r = conn.execute(
                f"SELECT {_PRIVILEGE_COLUMNS} FROM authz_privilege WHERE id = %s",
                (privilege_id,),
            ).fetchone()
        if not r:
            raise PrivilegeNotFound(privilege_id)
        return _privilege_from_row(r)

    def create_privilege(self, privilege: PrivilegeRecord) -> None:
        """Insert privilege, assigning id (when empty) and initial version."""
        privilege_id = privilege.id or uuid4().hex
        with self._pool.connection() as conn:
            cur = conn.execute(
                f"""
                INSERT INTO authz_privilege ({_PRIVILEGE_COLUMNS})
                VALUES (%s, %s, %s, %s, %s, %s, %s)
                ON CONFLICT (id) DO NOTHING
                """,
                (
                    privilege_id,
                    INITIAL_VERSION,
                    privilege.name,
                    privilege.description,
                    privilege.read_only,
                    privilege.type,
                    Jsonb(privilege.properties),
                ),
            )
            if cur.rowcount == 0:
                raise DuplicateRecord(f"Privilege already exists: {privilege_id}")
        privilege.id = privilege_id
        privilege.version = INITIAL_VERSION

    def update_privilege(self, privilege: PrivilegeRecord) -> None:
        """Update privilege; bumps version."""
        with self._pool.connection() as conn:
            r = conn.execute(
                "SELECT version FROM authz_privilege WHERE id = %s FOR UPDATE",
                (privilege.id,),
            ).fetchone()
            if not r:
                raise PrivilegeNotFound(privilege.id)
            check_version("Privilege", privilege.id, privilege.version, r[0])
            version = next_version(r[0])
            conn.execute(
                """
                UPDATE authz_privilege
                SET version = %s, name = %s, description = %s, read_only = %s,
                    type = %s, properties = %s
                WHERE id = %s
                """,
                (
                    version,
                    privilege.name,
                    privilege.description,
                    privilege.read_only,
                    privilege.type,
                    Jsonb(privilege.properties),
                    privilege.id,
                ),
            )
        privilege.version = version

    def delete_privilege(self, privilege_id: str) -> None:
        """Delete privilege by id."""
        with self._pool.connection() as conn:
            cur = conn.execute(
                "DELETE FROM authz_privilege WHERE id = %s", (privilege_id,)
            )
            if cur.rowcount == 0:
                raise PrivilegeNotFound(privilege_id)
