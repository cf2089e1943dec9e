"""Authorization manager - role and privilege CRUD with change notification."""

import structlog

from authzman.application.ports import (
    ChangeNotifier,
    ConfigurationStore,
    PrivilegeInheritanceResolver,
)
from authzman.application.services.descriptor_registry import (
    PrivilegeDescriptorRegistry,
)
from authzman.application.services.model_converter import ModelConverter
from authzman.domain.entities import Privilege, Role
from authzman.domain.events import AuthorizationConfigurationChanged
from authzman.domain.records import PrivilegeRecord
from authzman.domain.value_objects import METHOD_PROPERTY

logger = structlog.get_logger(__name__)

DEFAULT_SOURCE = "default"


class AuthorizationManager:
    """Manage roles and privileges held in the configuration store.

    Every successful add/update/delete publishes exactly one
    AuthorizationConfigurationChanged after the store call returns.
    Store errors (RoleNotFound, PrivilegeNotFound, ...) propagate unchanged
    and nothing is published for them.
    """

    def __init__(
        self,
        configuration: ConfigurationStore,
        privilege_inheritance: PrivilegeInheritanceResolver,
        notifier: ChangeNotifier,
        registry: PrivilegeDescriptorRegistry,
        source: str = DEFAULT_SOURCE,
    ) -> None:
        self._configuration = configuration
        self._privilege_inheritance = privilege_inheritance
        self._notifier = notifier
        self._converter = ModelConverter(source, registry)

    @property
    def source(self) -> str:
        return self._converter.source

    @property
    def supports_write(self) -> bool:
        return True

    # --- Roles ---

    def list_roles(self) -> set[Role]:
        return {self._converter.to_domain_role(r) for r in self._configuration.list_roles()}

    def get_role(self, role_id: str) -> Role:
        return self._converter.to_domain_role(self._configuration.read_role(role_id))

    def add_role(self, role: Role) -> Role:
        # store may assign id/version on the record, so keep the reference
        record = self._converter.to_record_role(role)
        self._configuration.create_role(record)
        logger.info("role_added", role_id=record.id)
        self._fire_authorization_changed()
        return self._converter.to_domain_role(record)

    def update_role(self, role: Role) -> Role:
        record = self._converter.to_record_role(role)
        self._configuration.update_role(record)
        logger.info("role_updated", role_id=record.id, version=record.version)
        self._fire_authorization_changed()
        return self._converter.to_domain_role(record)

    def delete_role(self, role_id: str) -> None:
        self._configuration.delete_role(role_id)
        logger.info("role_deleted", role_id=role_id)
        self._fire_authorization_changed()

    # --- Privileges ---

    def list_privileges(self) -> set[Privilege]:
        return {
            self._converter.to_domain_privilege(p)
            for p in self._configuration.list_privileges()
        }

    def get_privilege(self, privilege_id: str) -> Privilege:
        return self._converter.to_domain_privilege(
            self._configuration.read_privilege(privilege_id)
        )

    def add_privilege(self, privilege: Privilege) -> Privilege:
        record = self._converter.to_record_privilege(privilege)
        # create implies read: expand methods before persisting
        self._add_inherited_methods(record)
        self._configuration.create_privilege(record)
        logger.info("privilege_added", privilege_id=record.id, type=record.type)
        self._fire_authorization_changed()
        return self._converter.to_domain_privilege(record)

    def update_privilege(self, privilege: Privilege) -> Privilege:
        record = self._converter.to_record_privilege(privilege)
        self._configuration.update_privilege(record)
        logger.info(
            "privilege_updated", privilege_id=record.id, version=record.version
        )
        self._fire_authorization_changed()
        return self._converter.to_domain_privilege(record)

    def delete_privilege(self, privilege_id: str) -> None:
        self._configuration.delete_privilege(privilege_id)
        logger.info("privilege_deleted", privilege_id=privilege_id)
        self._fire_authorization_changed()

    def _add_inherited_methods(self, record: PrivilegeRecord) -> None:
        method = record.get_property(METHOD_PROPERTY)
        if method is None:
            return
        methods = self._privilege_inheritance.inherited_methods(method)
        if methods:
            record.set_property(METHOD_PROPERTY, ",".join(methods))

    def _fire_authorization_changed(self) -> None:
        self._notifier.publish(AuthorizationConfigurationChanged())
