"""Wildcard privilege descriptor - permission pattern taken verbatim."""

from authzman.domain.records import PrivilegeRecord

P_PATTERN = "pattern"


class WildcardPrivilegeDescriptor:
    type = "wildcard"

    def render_permission(self, privilege: PrivilegeRecord) -> str:
        return privilege.get_property(P_PATTERN) or ""
