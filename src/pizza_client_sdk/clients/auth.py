from __future__ import annotations

import logging

from ..exceptions import ApiError
from ..models import AuthResponse, User
from .base import BaseClient

logger = logging.getLogger(__name__)


class AuthClient(BaseClient):
    def login(self, email: str, password: str) -> User:
        data = self._request(
            "PUT",
            "/api/auth",
            json_body={"email": email, "password": password},
            operation="auth.login",
        )
        return self._establish(self._decode(AuthResponse, data))

    def register(self, name: str, email: str, password: str) -> User:
        data = self._request(
            "POST",
            "/api/auth",
            json_body={"name": name, "email": email, "password": password},
            operation="auth.register",
        )
        return self._establish(self._decode(AuthResponse, data))

    def logout(self) -> None:
        """Notify the server, then drop local credentials whatever the outcome."""
        try:
            self._request("DELETE", "/api/auth", operation="auth.logout")
        except ApiError as exc:
            logger.info("logout_notify_failed", extra={"status_code": exc.status_code, "error_code": exc.code})
        finally:
            self.session.clear()

    def get_current_user(self) -> User | None:
        if self.session.token is None:
            return None
        try:
            data = self._request("GET", "/api/user/me", operation="auth.me")
            user = self._decode(User, data)
        except ApiError as exc:
            logger.info("session_invalidated", extra={"status_code": exc.status_code, "error_code": exc.code})
            self.session.clear()
            return None
        self.session.set_user(user)
        return user

    def _establish(self, response: AuthResponse) -> User:
        self.session.set_token(response.token)
        self.session.set_user(response.user)
        return response.user
