"""Mapping between domain objects and persisted configuration records."""

from authzman.application.services.descriptor_registry import (
    PrivilegeDescriptorRegistry,
)
from authzman.domain.entities import Privilege, Role
from authzman.domain.records import PrivilegeRecord, RoleRecord


class ModelConverter:
    """Converts Role/Privilege to and from RoleRecord/PrivilegeRecord.

    Stateless apart from the source tag stamped on roles and the descriptor
    registry used to render privilege permission strings. Collections are
    always copied, never shared with the input.
    """

    def __init__(self, source: str, registry: PrivilegeDescriptorRegistry) -> None:
        self._source = source
        self._registry = registry

    @property
    def source(self) -> str:
        return self._source

    def to_domain_role(self, record: RoleRecord) -> Role:
        return Role(
            role_id=record.id,
            version=record.version,
            name=record.name,
            source=self._source,
            description=record.description,
            read_only=record.read_only,
            privileges=set(record.privileges),
            roles=set(record.roles),
        )

    def to_record_role(self, role: Role) -> RoleRecord:
        return RoleRecord(
            id=role.role_id,
            version=role.version,
            name=role.name,
            description=role.description,
            read_only=role.read_only,
            privileges=set(role.privileges) if role.privileges is not None else set(),
            roles=set(role.roles) if role.roles is not None else set(),
        )

    def to_domain_privilege(self, record: PrivilegeRecord) -> Privilege:
        privilege = Privilege(
            id=record.id,
            version=record.version,
            name=record.name,
            description=record.description,
            read_only=record.read_only,
            type=record.type,
            properties=dict(record.properties),
        )
        # permission string is derived from current descriptor state
        descriptor = self._registry.lookup(record.type)
        if descriptor is not None:
            privilege.permission = descriptor.render_permission(record)
        return privilege

    def to_record_privilege(self, privilege: Privilege) -> PrivilegeRecord:
        return PrivilegeRecord(
            id=privilege.id,
            version=privilege.version,
            name=privilege.name,
            description=privilege.description,
            read_only=privilege.read_only,
            type=privilege.type,
            properties=(
                dict(privilege.properties) if privilege.properties is not None else {}
            ),
        )
