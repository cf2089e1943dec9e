"""Falcon ASGI application."""

import falcon.asgi
from falcon.asgi import App

from authzman.application.ports import ConfigurationStore
from authzman.application.services import (
    AuthorizationManager,
    PrivilegeDescriptorRegistry,
)
from authzman.interfaces.api.errors import register_error_handlers
from authzman.interfaces.api.resources.health import HealthResource
from authzman.interfaces.api.resources.privileges import (
    PrivilegeResource,
    PrivilegesResource,
    PrivilegeTypesResource,
)
from authzman.interfaces.api.resources.roles import RoleResource, RolesResource


def create_app(
    manager: AuthorizationManager,
    registry: PrivilegeDescriptorRegistry,
    store: ConfigurationStore,
    middleware: list | None = None,
) -> App:
    """Create Falcon ASGI app with routes and error handlers."""
    app = falcon.asgi.App(middleware=middleware or [])
    register_error_handlers(app)

    health = HealthResource(store)
    app.add_route("/v1/health", health)
    app.add_route("/v1/health/ready", health, suffix="ready")
    app.add_route("/v1/roles", RolesResource(manager))
    app.add_route("/v1/roles/{role_id}", RoleResource(manager))
    app.add_route("/v1/privileges", PrivilegesResource(manager))
    app.add_route("/v1/privilege-types", PrivilegeTypesResource(registry))
    app.add_route("/v1/privileges/{privilege_id}", PrivilegeResource(manager))
    return app
