"""Method privilege descriptor - grants methods on a permission domain."""

from authzman.domain.records import PrivilegeRecord
from authzman.domain.value_objects import METHOD_PROPERTY

P_PERMISSION = "permission"


class MethodPrivilegeDescriptor:
    """Type ``method``: ``{permission}:{method}``."""

    type = "method"

    def render_permission(self, privilege: PrivilegeRecord) -> str:
        permission = privilege.get_property(P_PERMISSION) or ""
        method = privilege.get_property(METHOD_PROPERTY) or ""
        return f"{permission}:{method}"
