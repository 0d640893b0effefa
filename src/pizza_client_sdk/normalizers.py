from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, ValidationError

from .models import Franchise, FranchiseList, User, UserList

logger = logging.getLogger(__name__)


def normalize_franchise_list(payload: Any) -> FranchiseList:
    """Return a franchise list whose ``admins``/``stores``/``more`` are always set.

    Accepts the raw JSON mapping, a ``FranchisePage``, an already normalized
    ``FranchiseList`` or ``None``. Entries that cannot be read as a franchise
    are skipped.
    """
    data = _as_mapping(payload)
    franchises: list[Franchise] = []
    for entry in _as_list(data.get("franchises")):
        raw = _as_mapping(entry)
        if not raw:
            continue
        raw["admins"] = _as_list(raw.get("admins"))
        raw["stores"] = _as_list(raw.get("stores"))
        try:
            franchises.append(Franchise.model_validate(raw))
        except ValidationError as exc:
            logger.debug("franchise_row_dropped", extra={"row_id": raw.get("id"), "error_count": exc.error_count()})
    return FranchiseList(franchises=franchises, more=_to_bool(data.get("more")))


def normalize_user_list(payload: Any) -> UserList:
    """Return a user list in which every user carries a ``roles`` list.

    A bare JSON array is read as the user rows with no further pages.
    """
    if isinstance(payload, list):
        data: dict[str, Any] = {"users": payload}
    else:
        data = _as_mapping(payload)
    users: list[User] = []
    for entry in _as_list(data.get("users")):
        raw = _as_mapping(entry)
        if not raw:
            continue
        raw["roles"] = _as_list(raw.get("roles"))
        try:
            users.append(User.model_validate(raw))
        except ValidationError as exc:
            logger.debug("user_row_dropped", extra={"row_id": raw.get("id"), "error_count": exc.error_count()})
    return UserList(users=users, more=_to_bool(data.get("more")))


def _as_mapping(value: Any) -> dict[str, Any]:
    if isinstance(value, BaseModel):
        return value.model_dump(by_alias=True)
    if isinstance(value, dict):
        return dict(value)
    return {}


def _as_list(value: Any) -> list[Any]:
    if isinstance(value, (list, tuple)):
        return list(value)
    return []


def _to_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "y", "on"}
    return False
