"""Pytest fixtures for authzman tests."""

from __future__ import annotations

import pytest

from authzman.application.services import (
    AuthorizationManager,
    PrivilegeDescriptorRegistry,
)
from authzman.domain.events import AuthorizationConfigurationChanged
from authzman.domain.records import PrivilegeRecord, RoleRecord
from authzman.infrastructure.persistence.memory import InMemoryConfigurationStore
from authzman.infrastructure.privileges import (
    RulePrivilegeInheritanceResolver,
    create_default_registry,
)


# --- Fakes ---


class SpyConfigurationStore(InMemoryConfigurationStore):
    """In-memory store that records each completed call into a shared log."""

    def __init__(self, calls: list[str]) -> None:
        super().__init__()
        self._calls = calls

    def list_roles(self) -> list[RoleRecord]:
        result = super().list_roles()
        self._calls.append("list_roles")
        return result

    def read_role(self, role_id: str) -> RoleRecord:
        result = super().read_role(role_id)
        self._calls.append("read_role")
        return result

    def create_role(self, role: RoleRecord) -> None:
        super().create_role(role)
        self._calls.append("create_role")

    def update_role(self, role: RoleRecord) -> None:
        super().update_role(role)
        self._calls.append("update_role")

    def delete_role(self, role_id: str) -> None:
        super().delete_role(role_id)
        self._calls.append("delete_role")

    def list_privileges(self) -> list[PrivilegeRecord]:
        result = super().list_privileges()
        self._calls.append("list_privileges")
        return result

    def read_privilege(self, privilege_id: str) -> PrivilegeRecord:
        result = super().read_privilege(privilege_id)
        self._calls.append("read_privilege")
        return result

    def create_privilege(self, privilege: PrivilegeRecord) -> None:
        super().create_privilege(privilege)
        self._calls.append("create_privilege")

    def update_privilege(self, privilege: PrivilegeRecord) -> None:
        super().update_privilege(privilege)
        self._calls.append("update_privilege")

    def delete_privilege(self, privilege_id: str) -> None:
        super().delete_privilege(privilege_id)
        self._calls.append("delete_privilege")


class RecordingNotifier:
    """Notifier that keeps published events and logs each publish."""

    def __init__(self, calls: list[str]) -> None:
        self.events: list[AuthorizationConfigurationChanged] = []
        self._calls = calls

    def publish(self, event: AuthorizationConfigurationChanged) -> None:
        self.events.append(event)
        self._calls.append("publish")


class StaticInheritanceResolver:
    """Resolver returning a fixed answer per input, input alone otherwise."""

    def __init__(self, answers: dict[str, list[str]] | None = None) -> None:
        self.answers = answers or {}
        self.requests: list[str] = []

    def inherited_methods(self, method: str) -> list[str]:
        self.requests.append(method)
        return list(self.answers.get(method, [method]))


class StubDescriptor:
    """Descriptor rendering ``{tag}:{properties}`` for a configurable type."""

    def __init__(self, type: str, tag: str) -> None:
        self.type = type
        self.tag = tag

    def render_permission(self, privilege: PrivilegeRecord) -> str:
        props = ",".join(f"{k}={v}" for k, v in sorted(privilege.properties.items()))
        return f"{self.tag}:{props}"


# --- Fixtures ---


@pytest.fixture
def calls() -> list[str]:
    """Shared ordered log of store calls and publishes."""
    return []


@pytest.fixture
def store(calls: list[str]) -> SpyConfigurationStore:
    return SpyConfigurationStore(calls)


@pytest.fixture
def notifier(calls: list[str]) -> RecordingNotifier:
    return RecordingNotifier(calls)


@pytest.fixture
def registry() -> PrivilegeDescriptorRegistry:
    return create_default_registry()


@pytest.fixture
def resolver() -> RulePrivilegeInheritanceResolver:
    return RulePrivilegeInheritanceResolver()


@pytest.fixture
def manager(store, notifier, registry, resolver) -> AuthorizationManager:
    """Manager over in-memory store with default descriptors and rules."""
    return AuthorizationManager(
        configuration=store,
        privilege_inheritance=resolver,
        notifier=notifier,
        registry=registry,
    )
