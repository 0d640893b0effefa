from __future__ import annotations

from .auth_store import MemoryAuthStore, TokenStore
from .exceptions import SessionStateError
from .models import Session, User


class SessionStore:
    """Current bearer token and resolved user.

    Token changes are mirrored to the durable ``TokenStore`` so a restarted
    client can pick the session back up; the user is never persisted and must
    be resolved again after a restart.
    """

    def __init__(self, token_store: TokenStore | None = None) -> None:
        self.token_store = token_store if token_store is not None else MemoryAuthStore()
        self._token: str | None = self.token_store.load()
        self._user: User | None = None

    def get(self) -> Session:
        return Session(token=self._token, user=self._user)

    @property
    def token(self) -> str | None:
        return self._token

    @property
    def user(self) -> User | None:
        return self._user

    @property
    def is_authenticated(self) -> bool:
        return self._token is not None

    def set_token(self, token: str) -> None:
        if not token:
            raise SessionStateError("Refusing to store an empty token; use clear() instead")
        if token != self._token:
            # a different credential may belong to a different identity
            self._user = None
        self._token = token
        self.token_store.save(token)

    def set_user(self, user: User) -> None:
        if self._token is None:
            raise SessionStateError("Cannot set a user without a token")
        self._user = user

    def clear(self) -> None:
        self._token = None
        self._user = None
        self.token_store.clear()
