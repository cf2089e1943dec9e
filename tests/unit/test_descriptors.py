"""Unit tests for built-in privilege descriptors."""

from authzman.domain.records import PrivilegeRecord
from authzman.infrastructure.privileges import (
    ApplicationPrivilegeDescriptor,
    MethodPrivilegeDescriptor,
    WildcardPrivilegeDescriptor,
)


def _record(type: str, **properties: str) -> PrivilegeRecord:
    return PrivilegeRecord(id="p", name="p", type=type, properties=properties)


class TestMethodPrivilegeDescriptor:
    def test_type(self) -> None:
        assert MethodPrivilegeDescriptor().type == "method"

    def test_render(self) -> None:
        record = _record("method", method="create,read", permission="nexus:users")
        assert MethodPrivilegeDescriptor().render_permission(record) == "nexus:users:create,read"

    def test_render_missing_properties(self) -> None:
        assert MethodPrivilegeDescriptor().render_permission(_record("method")) == ":"


class TestApplicationPrivilegeDescriptor:
    def test_type(self) -> None:
        assert ApplicationPrivilegeDescriptor().type == "application"

    def test_render(self) -> None:
        record = _record("application", domain="roles", actions="read,update")
        assert (
            ApplicationPrivilegeDescriptor().render_permission(record)
            == "nexus:roles:read,update"
        )


class TestWildcardPrivilegeDescriptor:
    def test_type(self) -> None:
        assert WildcardPrivilegeDescriptor().type == "wildcard"

    def test_render_is_verbatim(self) -> None:
        record = _record("wildcard", pattern="nexus:repository-view:*:*:read")
        assert (
            WildcardPrivilegeDescriptor().render_permission(record)
            == "nexus:repository-view:*:*:read"
        )

    def test_render_missing_pattern(self) -> None:
        assert WildcardPrivilegeDescriptor().render_permission(_record("wildcard")) == ""
