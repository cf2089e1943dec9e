"""Registry: select privilege descriptor by privilege type."""

from collections.abc import Iterable

from authzman.application.ports import PrivilegeDescriptor


class PrivilegeDescriptorRegistry:
    """Ordered privilege descriptors, looked up by type.

    Several descriptors may register the same type; the first registered one
    is used and later ones are shadowed.
    """

    def __init__(self, descriptors: Iterable[PrivilegeDescriptor] = ()) -> None:
        self._descriptors: list[PrivilegeDescriptor] = []
        # type -> first registered descriptor
        self._by_type: dict[str, PrivilegeDescriptor] = {}
        for descriptor in descriptors:
            self.register(descriptor)

    def register(self, descriptor: PrivilegeDescriptor) -> None:
        """Append descriptor; it only takes effect if its type is not yet taken."""
        self._descriptors.append(descriptor)
        self._by_type.setdefault(descriptor.type, descriptor)

    def lookup(self, privilege_type: str | None) -> PrivilegeDescriptor | None:
        """Return descriptor for privilege type or None."""
        if privilege_type is None:
            return None
        return self._by_type.get(privilege_type)

    def descriptors(self) -> list[PrivilegeDescriptor]:
        """Return all registered descriptors in registration order."""
        return list(self._descriptors)

    def types(self) -> list[str]:
        """Return distinct registered types in registration order."""
        return list(self._by_type)

    def __len__(self) -> int:
        return len(self._descriptors)
