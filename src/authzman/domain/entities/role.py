"""Role entity for RBAC."""

from dataclasses import dataclass, field


@dataclass
class Role:
    """Role - named bundle of privileges and nested roles granted together."""

    role_id: str
    name: str
    description: str | None = None
    version: str | None = None
    read_only: bool = False
    privileges: set[str] | None = field(default_factory=set)
    roles: set[str] | None = field(default_factory=set)
    source: str | None = None

    def __hash__(self) -> int:
        return hash((self.source, self.role_id))
