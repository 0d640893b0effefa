from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .models import Identifier, Role, User


def _role_tag(entry: Any) -> str | None:
    value = entry.get("role") if isinstance(entry, Mapping) else getattr(entry, "role", None)
    if isinstance(value, Role):
        return value.value
    if isinstance(value, str):
        return value.lower()
    return None


def _assignments(user: User | Mapping[str, Any] | None) -> list[Any]:
    if user is None:
        return []
    roles = user.get("roles") if isinstance(user, Mapping) else getattr(user, "roles", None)
    return list(roles or [])


def is_role(user: User | Mapping[str, Any] | None, role: Role | str) -> bool:
    """True when ``user`` holds ``role``; scope (``objectId``) is ignored."""
    wanted = role.value if isinstance(role, Role) else str(role).lower()
    return any(_role_tag(entry) == wanted for entry in _assignments(user))


def is_franchisee_of(user: User | Mapping[str, Any] | None, franchise_id: Identifier) -> bool:
    for entry in _assignments(user):
        if _role_tag(entry) != Role.FRANCHISEE.value:
            continue
        if isinstance(entry, Mapping):
            object_id = entry.get("objectId", entry.get("object_id"))
        else:
            object_id = getattr(entry, "object_id", None)
        if object_id is not None and str(object_id) == str(franchise_id):
            return True
    return False
