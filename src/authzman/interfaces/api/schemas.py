"""JSON (de)serialization of roles and privileges for the HTTP API."""

from typing import Any

from authzman.domain.entities import Privilege, Role
from authzman.domain.exceptions import ValidationError


def _optional_str(body: dict[str, Any], key: str) -> str | None:
    value = body.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"Field '{key}' must be a string")
    return value


def _required_str(body: dict[str, Any], key: str) -> str:
    value = _optional_str(body, key)
    if not value:
        raise ValidationError(f"Missing required field: '{key}'")
    return value


def _str_set(body: dict[str, Any], key: str) -> set[str]:
    value = body.get(key) or []
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ValidationError(f"Field '{key}' must be a list of strings")
    return set(value)


def _bool(body: dict[str, Any], key: str) -> bool:
    value = body.get(key, False)
    if not isinstance(value, bool):
        raise ValidationError(f"Field '{key}' must be a boolean")
    return value


def _properties(body: dict[str, Any]) -> dict[str, str]:
    value = body.get("properties") or {}
    if not isinstance(value, dict) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in value.items()
    ):
        raise ValidationError("Field 'properties' must be an object of strings")
    return dict(value)


def _require_object(body: Any) -> dict[str, Any]:
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object")
    return body


def role_to_dict(role: Role) -> dict[str, Any]:
    return {
        "role_id": role.role_id,
        "version": role.version,
        "name": role.name,
        "description": role.description,
        "source": role.source,
        "read_only": role.read_only,
        "privileges": sorted(role.privileges or ()),
        "roles": sorted(role.roles or ()),
    }


def role_from_dict(body: Any, role_id: str | None = None) -> Role:
    """Build Role from request body. Path role_id overrides body role_id."""
    body = _require_object(body)
    return Role(
        role_id=role_id if role_id is not None else _optional_str(body, "role_id") or "",
        version=_optional_str(body, "version"),
        name=_required_str(body, "name"),
        description=_optional_str(body, "description"),
        read_only=_bool(body, "read_only"),
        privileges=_str_set(body, "privileges"),
        roles=_str_set(body, "roles"),
    )


def privilege_to_dict(privilege: Privilege) -> dict[str, Any]:
    return {
        "id": privilege.id,
        "version": privilege.version,
        "name": privilege.name,
        "description": privilege.description,
        "read_only": privilege.read_only,
        "type": privilege.type,
        "properties": dict(privilege.properties or {}),
        "permission": privilege.permission,
    }


def privilege_from_dict(body: Any, privilege_id: str | None = None) -> Privilege:
    """Build Privilege from request body. Path id overrides body id."""
    body = _require_object(body)
    return Privilege(
        id=privilege_id if privilege_id is not None else _optional_str(body, "id") or "",
        version=_optional_str(body, "version"),
        name=_required_str(body, "name"),
        description=_optional_str(body, "description"),
        read_only=_bool(body, "read_only"),
        type=_required_str(body, "type"),
        properties=_properties(body),
    )
