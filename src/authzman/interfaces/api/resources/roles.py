"""Roles API resources."""

import asyncio

import falcon
import falcon.asgi

from authzman.application.services import AuthorizationManager
from authzman.interfaces.api.schemas import role_from_dict, role_to_dict


class RolesResource:
    """GET/POST /v1/roles - list and add roles."""

    def __init__(self, manager: AuthorizationManager) -> None:
        self._manager = manager

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """List roles ordered by id."""
        roles = await asyncio.to_thread(self._manager.list_roles)
        items = [role_to_dict(r) for r in sorted(roles, key=lambda r: r.role_id)]
        resp.media = {"items": items}
        resp.status = falcon.HTTP_200

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Add role."""
        role = role_from_dict(await req.get_media())
        created = await asyncio.to_thread(self._manager.add_role, role)
        resp.media = role_to_dict(created)
        resp.status = falcon.HTTP_201


class RoleResource:
    """GET/PUT/DELETE /v1/roles/{role_id}."""

    def __init__(self, manager: AuthorizationManager) -> None:
        self._manager = manager

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, role_id: str
    ) -> None:
        role = await asyncio.to_thread(self._manager.get_role, role_id)
        resp.media = role_to_dict(role)
        resp.status = falcon.HTTP_200

    async def on_put(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, role_id: str
    ) -> None:
        role = role_from_dict(await req.get_media(), role_id=role_id)
        updated = await asyncio.to_thread(self._manager.update_role, role)
        resp.media = role_to_dict(updated)
        resp.status = falcon.HTTP_200

    async def on_delete(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, role_id: str
    ) -> None:
        await asyncio.to_thread(self._manager.delete_role, role_id)
        resp.status = falcon.HTTP_204
