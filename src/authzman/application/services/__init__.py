"""Application services."""

from authzman.application.services.authorization_manager import (
    DEFAULT_SOURCE,
    AuthorizationManager,
)
from authzman.application.services.descriptor_registry import (
    PrivilegeDescriptorRegistry,
)
from authzman.application.services.model_converter import ModelConverter

__all__ = [
    "DEFAULT_SOURCE",
    "AuthorizationManager",
    "ModelConverter",
    "PrivilegeDescriptorRegistry",
]
