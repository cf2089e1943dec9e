"""Application privilege descriptor - actions on an application domain."""

from authzman.domain.records import PrivilegeRecord

P_DOMAIN = "domain"
P_ACTIONS = "actions"


class ApplicationPrivilegeDescriptor:
    """Type ``application``: ``nexus:{domain}:{actions}``."""

    type = "application"

    def render_permission(self, privilege: PrivilegeRecord) -> str:
        domain = privilege.get_property(P_DOMAIN) or ""
        actions = privilege.get_property(P_ACTIONS) or ""
        return f"nexus:{domain}:{actions}"
