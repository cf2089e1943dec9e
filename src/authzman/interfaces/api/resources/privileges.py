"""Privileges API resources."""

import asyncio

import falcon
import falcon.asgi

from authzman.application.services import (
    AuthorizationManager,
    PrivilegeDescriptorRegistry,
)
from authzman.interfaces.api.schemas import privilege_from_dict, privilege_to_dict


class PrivilegesResource:
    """GET/POST /v1/privileges - list and add privileges."""

    def __init__(self, manager: AuthorizationManager) -> None:
        self._manager = manager

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """List privileges ordered by id, with rendered permissions."""
        privileges = await asyncio.to_thread(self._manager.list_privileges)
        items = [privilege_to_dict(p) for p in sorted(privileges, key=lambda p: p.id)]
        resp.media = {"items": items}
        resp.status = falcon.HTTP_200

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Add privilege. Method privileges are stored with inherited methods."""
        privilege = privilege_from_dict(await req.get_media())
        created = await asyncio.to_thread(self._manager.add_privilege, privilege)
        resp.media = privilege_to_dict(created)
        resp.status = falcon.HTTP_201


class PrivilegeResource:
    """GET/PUT/DELETE /v1/privileges/{privilege_id}."""

    def __init__(self, manager: AuthorizationManager) -> None:
        self._manager = manager

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, privilege_id: str
    ) -> None:
        privilege = await asyncio.to_thread(self._manager.get_privilege, privilege_id)
        resp.media = privilege_to_dict(privilege)
        resp.status = falcon.HTTP_200

    async def on_put(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, privilege_id: str
    ) -> None:
        privilege = privilege_from_dict(await req.get_media(), privilege_id=privilege_id)
        updated = await asyncio.to_thread(self._manager.update_privilege, privilege)
        resp.media = privilege_to_dict(updated)
        resp.status = falcon.HTTP_200

    async def on_delete(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, privilege_id: str
    ) -> None:
        await asyncio.to_thread(self._manager.delete_privilege, privilege_id)
        resp.status = falcon.HTTP_204


class PrivilegeTypesResource:
    """GET /v1/privilege-types - registered privilege types."""

    def __init__(self, registry: PrivilegeDescriptorRegistry) -> None:
        self._registry = registry

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        resp.media = {"items": self._registry.types()}
        resp.status = falcon.HTTP_200
