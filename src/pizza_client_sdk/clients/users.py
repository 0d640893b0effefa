from __future__ import annotations

from typing import Any

from ..models import AuthResponse, Identifier, User, UserPage
from ..pagination import DEFAULT_LIMIT, WILDCARD, PageQuery
from .base import BaseClient, body_of, id_of


class UsersClient(BaseClient):
    def get_users(
        self,
        page: int | PageQuery = 0,
        limit: int = DEFAULT_LIMIT,
        name: str = WILDCARD,
    ) -> UserPage:
        """List users; ``page`` is zero-based and sent one-based on the wire."""
        query = page if isinstance(page, PageQuery) else PageQuery(page=page, limit=limit, name=name)
        data = self._request("GET", "/api/user", params=query.to_user_params(), operation="users.list")
        return self._decode(UserPage, data)

    def delete_user(self, user: Identifier | User) -> None:
        self._request("DELETE", f"/api/user/{id_of(user)}", operation="users.delete")

    def update_user(self, user: User | dict[str, Any]) -> User:
        """Update a profile; the server may rotate the token, which is re-stored."""
        user_id = id_of(user)
        data = self._request("PUT", f"/api/user/{user_id}", json_body=body_of(user), operation="users.update")
        response = self._decode(AuthResponse, data)
        current = self.session.user
        was_current = current is not None and str(current.id) == str(response.user.id)
        self.session.set_token(response.token)
        if was_current:
            self.session.set_user(response.user)
        return response.user
