from __future__ import annotations

import pytest
import responses

from pizza_client_sdk.clients.auth import AuthClient
from pizza_client_sdk.exceptions import AuthError, SessionStateError
from pizza_client_sdk.http_client import HttpClient
from pizza_client_sdk.models import Role, User
from pizza_client_sdk.session import SessionStore
from pizza_client_sdk.session_flow import SessionFlow, SessionPhase

from conftest import SERVICE_URL

DINER = {"id": 2, "name": "pizza diner", "email": "d@jwt.com", "roles": [{"role": "diner"}]}


@pytest.fixture
def flow(http: HttpClient, session_store: SessionStore) -> SessionFlow:
    return SessionFlow(AuthClient(http=http, session=session_store))


def test_starts_anonymous(flow: SessionFlow) -> None:
    assert flow.phase is SessionPhase.ANONYMOUS
    assert flow.user is None
    assert not flow.is_role(Role.DINER)


def test_bootstrap_without_token_stays_anonymous(flow: SessionFlow) -> None:
    assert flow.bootstrap() is None
    assert flow.phase is SessionPhase.ANONYMOUS


@responses.activate
def test_bootstrap_with_valid_token_is_authenticated(flow: SessionFlow, session_store: SessionStore) -> None:
    session_store.set_token("stored")
    responses.add(responses.GET, f"{SERVICE_URL}/api/user/me", json=DINER, status=200)

    user = flow.bootstrap()

    assert user is not None
    assert flow.phase is SessionPhase.AUTHENTICATED
    assert flow.is_role(Role.DINER)


@responses.activate
def test_bootstrap_with_expired_token_falls_back(flow: SessionFlow, session_store: SessionStore) -> None:
    session_store.set_token("expired")
    responses.add(responses.GET, f"{SERVICE_URL}/api/user/me", json={"message": "unauthorized"}, status=401)

    assert flow.bootstrap() is None
    assert flow.phase is SessionPhase.ANONYMOUS
    assert session_store.token is None


@responses.activate
def test_login_failure_settles_anonymous(flow: SessionFlow) -> None:
    responses.add(responses.PUT, f"{SERVICE_URL}/api/auth", json={"message": "unauthorized"}, status=401)

    with pytest.raises(AuthError):
        flow.login("d@jwt.com", "wrong")

    assert flow.phase is SessionPhase.ANONYMOUS


@responses.activate
def test_login_then_logout(flow: SessionFlow, session_store: SessionStore) -> None:
    responses.add(responses.PUT, f"{SERVICE_URL}/api/auth", json={"user": DINER, "token": "T"}, status=200)
    responses.add(responses.DELETE, f"{SERVICE_URL}/api/auth", json={"message": "logout successful"}, status=200)

    flow.login("d@jwt.com", "diner")
    assert flow.phase is SessionPhase.AUTHENTICATED
    assert flow.user is not None and flow.user.email == "d@jwt.com"

    flow.logout()
    assert flow.phase is SessionPhase.ANONYMOUS
    assert flow.user is None
    assert session_store.token is None


def test_reentrant_transition_is_rejected(flow: SessionFlow, monkeypatch: pytest.MonkeyPatch) -> None:
    def _login(email: str, password: str) -> User:
        assert flow.phase is SessionPhase.AUTHENTICATING
        with pytest.raises(SessionStateError):
            flow.bootstrap()
        user = User.model_validate(DINER)
        flow.auth.session.set_token("T")
        flow.auth.session.set_user(user)
        return user

    monkeypatch.setattr(flow.auth, "login", _login)

    flow.login("d@jwt.com", "diner")

    assert flow.phase is SessionPhase.AUTHENTICATED


def test_pending_phase_is_released_after_unexpected_error(flow: SessionFlow, monkeypatch: pytest.MonkeyPatch) -> None:
    def _explode(email: str, password: str) -> User:
        raise RuntimeError("boom")

    monkeypatch.setattr(flow.auth, "login", _explode)

    with pytest.raises(RuntimeError):
        flow.login("d@jwt.com", "diner")

    assert flow.phase is SessionPhase.ANONYMOUS
    assert flow.bootstrap() is None


@responses.activate
def test_gate_follows_store_when_token_rotation_drops_user(flow: SessionFlow, session_store: SessionStore) -> None:
    admin = {"id": 1, "name": "Kai Chen", "email": "a@jwt.com", "roles": [{"role": "admin"}]}
    responses.add(responses.PUT, f"{SERVICE_URL}/api/auth", json={"user": admin, "token": "A"}, status=200)
    flow.login("a@jwt.com", "admin")
    assert flow.is_role(Role.ADMIN)

    session_store.set_token("B")

    assert session_store.user is None
    assert flow.user is None
    assert flow.phase is SessionPhase.ANONYMOUS
    assert not flow.is_role(Role.ADMIN)
