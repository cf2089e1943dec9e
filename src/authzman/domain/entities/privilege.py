"""Privilege entity - typed grantable capability."""

from dataclasses import dataclass, field


@dataclass
class Privilege:
    """Privilege - type selects the descriptor that interprets the properties.

    ``permission`` is derived from the descriptor on every read and is never
    persisted.
    """

    id: str
    name: str
    type: str
    description: str | None = None
    version: str | None = None
    read_only: bool = False
    properties: dict[str, str] | None = field(default_factory=dict)
    permission: str | None = None

    def __hash__(self) -> int:
        return hash(self.id)
