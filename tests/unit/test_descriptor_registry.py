"""Unit tests for PrivilegeDescriptorRegistry."""

from authzman.application.services import PrivilegeDescriptorRegistry
from authzman.domain.records import PrivilegeRecord
from authzman.infrastructure.privileges import create_default_registry

from tests.conftest import StubDescriptor


class TestLookup:
    def test_empty_registry_returns_none(self) -> None:
        assert PrivilegeDescriptorRegistry().lookup("method") is None

    def test_none_type_returns_none(self) -> None:
        assert create_default_registry().lookup(None) is None

    def test_unknown_type_returns_none(self) -> None:
        assert create_default_registry().lookup("repository-target") is None

    def test_lookup_by_type(self) -> None:
        first = StubDescriptor("a", "A")
        second = StubDescriptor("b", "B")
        registry = PrivilegeDescriptorRegistry([first, second])
        assert registry.lookup("a") is first
        assert registry.lookup("b") is second

    def test_first_registered_wins_for_duplicate_type(self) -> None:
        first = StubDescriptor("method", "first")
        shadowed = StubDescriptor("method", "second")
        registry = PrivilegeDescriptorRegistry([first, shadowed])

        record = PrivilegeRecord(id="p", name="p", type="method", properties={"k": "v"})
        for _ in range(3):
            assert registry.lookup("method") is first
            assert registry.lookup("method").render_permission(record) == "first:k=v"

    def test_register_after_construction_does_not_replace(self) -> None:
        first = StubDescriptor("method", "first")
        registry = PrivilegeDescriptorRegistry([first])
        registry.register(StubDescriptor("method", "late"))
        assert registry.lookup("method") is first


class TestListing:
    def test_default_registry_types_in_order(self) -> None:
        assert create_default_registry().types() == ["method", "application", "wildcard"]

    def test_descriptors_keep_shadowed_entries(self) -> None:
        registry = PrivilegeDescriptorRegistry(
            [StubDescriptor("a", "1"), StubDescriptor("a", "2"), StubDescriptor("b", "3")]
        )
        assert [d.tag for d in registry.descriptors()] == ["1", "2", "3"]
        assert registry.types() == ["a", "b"]
        assert len(registry) == 3
