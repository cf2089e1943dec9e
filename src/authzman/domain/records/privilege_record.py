"""Persisted privilege record."""

from dataclasses import dataclass, field


@dataclass
class PrivilegeRecord:
    """Privilege as stored by the configuration store (no permission string)."""

    id: str
    name: str
    type: str
    description: str | None = None
    version: str | None = None
    read_only: bool = False
    properties: dict[str, str] = field(default_factory=dict)

    def get_property(self, key: str) -> str | None:
        """Return property value or None when unset."""
        return self.properties.get(key)

    def set_property(self, key: str, value: str) -> None:
        self.properties[key] = value
