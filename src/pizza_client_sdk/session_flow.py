from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, TypeVar

from .clients.auth import AuthClient
from .exceptions import SessionStateError
from .models import Role, User
from .roles import is_role

logger = logging.getLogger(__name__)

ResultT = TypeVar("ResultT")


class SessionPhase(str, Enum):
    ANONYMOUS = "anonymous"
    AUTHENTICATING = "authenticating"
    RESOLVING = "resolving"
    AUTHENTICATED = "authenticated"


class SessionFlow:
    """Session-dependent UI state.

    ``bootstrap`` resolves a stored token (RESOLVING), ``login``/``register``
    pass through AUTHENTICATING. Outside those calls the phase is read from the
    session store: AUTHENTICATED while it holds a user, ANONYMOUS otherwise.
    Expiry is not pushed; it shows up as the next failed call.
    """

    def __init__(self, auth: AuthClient) -> None:
        self.auth = auth
        self._pending: SessionPhase | None = None

    @property
    def phase(self) -> SessionPhase:
        if self._pending is not None:
            return self._pending
        if self.auth.session.user is not None:
            return SessionPhase.AUTHENTICATED
        return SessionPhase.ANONYMOUS

    @property
    def user(self) -> User | None:
        return self.auth.session.user

    def is_role(self, role: Role | str) -> bool:
        return self.phase is SessionPhase.AUTHENTICATED and is_role(self.user, role)

    def bootstrap(self) -> User | None:
        return self._transition("bootstrap", SessionPhase.RESOLVING, self.auth.get_current_user)

    def login(self, email: str, password: str) -> User:
        return self._transition(
            "login", SessionPhase.AUTHENTICATING, lambda: self.auth.login(email, password)
        )

    def register(self, name: str, email: str, password: str) -> User:
        return self._transition(
            "register", SessionPhase.AUTHENTICATING, lambda: self.auth.register(name, email, password)
        )

    def logout(self) -> None:
        self.auth.logout()
        logger.debug("session_phase", extra={"phase": self.phase.value})

    def _transition(self, action: str, pending: SessionPhase, call: Callable[[], ResultT]) -> ResultT:
        if self._pending is not None:
            raise SessionStateError(f"Cannot {action} while {self._pending.value}")
        self._pending = pending
        try:
            return call()
        finally:
            self._pending = None
            logger.debug("session_phase", extra={"phase": self.phase.value})
