"""Privilege descriptor port - per-type permission rendering."""

from typing import Protocol

from authzman.domain.records import PrivilegeRecord


class PrivilegeDescriptor(Protocol):
    """Handler for one privilege type."""

    @property
    def type(self) -> str: ...

    def render_permission(self, privilege: PrivilegeRecord) -> str:
        """Render canonical permission string for the privilege record."""
        ...
