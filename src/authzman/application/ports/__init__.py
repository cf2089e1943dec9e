"""Application ports - interfaces for external adapters."""

from authzman.application.ports.change_notifier import ChangeNotifier
from authzman.application.ports.configuration_store import ConfigurationStore
from authzman.application.ports.privilege_descriptor import PrivilegeDescriptor
from authzman.application.ports.privilege_inheritance import (
    PrivilegeInheritanceResolver,
)

__all__ = [
    "ChangeNotifier",
    "ConfigurationStore",
    "PrivilegeDescriptor",
    "PrivilegeInheritanceResolver",
]
