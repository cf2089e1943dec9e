"""Built-in privilege descriptors and inheritance rules."""

from authzman.application.services.descriptor_registry import (
    PrivilegeDescriptorRegistry,
)
from authzman.infrastructure.privileges.application_descriptor import (
    ApplicationPrivilegeDescriptor,
)
from authzman.infrastructure.privileges.inheritance import (
    DEFAULT_INHERITANCE_RULES,
    RulePrivilegeInheritanceResolver,
)
from authzman.infrastructure.privileges.method_descriptor import (
    MethodPrivilegeDescriptor,
)
from authzman.infrastructure.privileges.wildcard_descriptor import (
    WildcardPrivilegeDescriptor,
)


def create_default_registry() -> PrivilegeDescriptorRegistry:
    """Registry with the built-in method, application and wildcard descriptors."""
    return PrivilegeDescriptorRegistry(
        [
            MethodPrivilegeDescriptor(),
            ApplicationPrivilegeDescriptor(),
            WildcardPrivilegeDescriptor(),
        ]
    )


__all__ = [
    "DEFAULT_INHERITANCE_RULES",
    "ApplicationPrivilegeDescriptor",
    "MethodPrivilegeDescriptor",
    "RulePrivilegeInheritanceResolver",
    "WildcardPrivilegeDescriptor",
    "create_default_registry",
]
