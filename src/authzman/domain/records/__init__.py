"""Persisted configuration records."""

from authzman.domain.records.privilege_record import PrivilegeRecord
from authzman.domain.records.role_record import RoleRecord

__all__ = [
    "PrivilegeRecord",
    "RoleRecord",
]
