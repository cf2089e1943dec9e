"""Persisted role record."""

from dataclasses import dataclass, field


@dataclass
class RoleRecord:
    """Role as stored by the configuration store."""

    id: str
    name: str
    description: str | None = None
    version: str | None = None
    read_only: bool = False
    privileges: set[str] = field(default_factory=set)
    roles: set[str] = field(default_factory=set)
