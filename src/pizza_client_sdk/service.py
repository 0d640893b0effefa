from __future__ import annotations

import logging
from typing import Any

from .auth_store import AuthStore, TokenStore
from .clients.auth import AuthClient
from .clients.docs import DocsClient
from .clients.franchises import FranchisesClient
from .clients.orders import OrdersClient
from .clients.users import UsersClient
from .config import ClientConfig, load_config
from .exceptions import ApiError
from .http_client import HttpClient
from .models import (
    Endpoints,
    FranchiseList,
    FranchisePage,
    FranchiseRecord,
    Identifier,
    MenuItem,
    OrderDraft,
    OrderHistory,
    OrderResponse,
    Role,
    Store,
    User,
    UserList,
    UserPage,
    VerifyResponse,
)
from .normalizers import normalize_franchise_list, normalize_user_list
from .pagination import DEFAULT_LIMIT, WILDCARD, PageQuery
from .roles import is_role
from .session import SessionStore
from .session_flow import SessionFlow
from .telemetry import TelemetryLogger, build_event

logger = logging.getLogger(__name__)


class PizzaService:
    """Everything a storefront view needs, behind one object.

    All adapters share one ``HttpClient`` and one ``SessionStore`` so a token
    stored by ``login`` is the token every later call sends.
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        token_store: TokenStore | None = None,
        http: HttpClient | None = None,
        telemetry: TelemetryLogger | None = None,
    ) -> None:
        self.config = config
        if http is not None:
            self.session = http.session_store
            self.http = http
        else:
            store = token_store if token_store is not None else AuthStore(app_name=config.app_name)
            self.session = SessionStore(store)
            self.http = HttpClient(config=config, session_store=self.session)
        self.telemetry = telemetry or TelemetryLogger(app_name=config.app_name, enabled=False)
        self.auth = AuthClient(http=self.http, session=self.session, module="auth")
        self.users = UsersClient(http=self.http, session=self.session, module="users")
        self.orders = OrdersClient(http=self.http, session=self.session, module="orders")
        self.franchises = FranchisesClient(http=self.http, session=self.session, module="franchises")
        self.docs_client = DocsClient(http=self.http, session=self.session, module="docs")
        self.flow = SessionFlow(self.auth)

    @classmethod
    def from_env(cls, env_file: str | None = None, **kwargs: Any) -> "PizzaService":
        return cls(load_config(env_file), **kwargs)

    # ---- Auth

    def login(self, email: str, password: str) -> User:
        logger.info("login_attempt")
        try:
            user = self.flow.login(email, password)
        except ApiError as exc:
            logger.warning("login_failure", extra={"status_code": exc.status_code})
            self._auth_event("login", success=False, error=exc)
            raise
        logger.info("login_success", extra={"user_id": user.id})
        self._auth_event("login", success=True)
        return user

    def register(self, name: str, email: str, password: str) -> User:
        logger.info("register_attempt")
        try:
            user = self.flow.register(name, email, password)
        except ApiError as exc:
            logger.warning("register_failure", extra={"status_code": exc.status_code})
            self._auth_event("register", success=False, error=exc)
            raise
        self._auth_event("register", success=True)
        return user

    def logout(self) -> None:
        logger.info("logout")
        self.flow.logout()
        self._auth_event("logout", success=True)

    def get_current_user(self) -> User | None:
        user = self.flow.bootstrap()
        self._auth_event("resolve", success=user is not None)
        return user

    @property
    def user(self) -> User | None:
        return self.session.user

    def is_role(self, role: Role | str) -> bool:
        allowed = is_role(self.session.user, role)
        if not allowed:
            self.telemetry.emit(
                build_event(
                    category="permission_denied",
                    name="role_gate",
                    module="roles",
                    action=role.value if isinstance(role, Role) else str(role),
                    success=False,
                )
            )
        return allowed

    # ---- Users

    def get_users(self, page: int | PageQuery = 0, limit: int = DEFAULT_LIMIT, name: str = WILDCARD) -> UserPage:
        return self.users.get_users(page, limit, name)

    def list_users(self, page: int | PageQuery = 0, limit: int = DEFAULT_LIMIT, name: str = WILDCARD) -> UserList:
        return normalize_user_list(self.users.get_users(page, limit, name))

    def delete_user(self, user: Identifier | User) -> None:
        self.users.delete_user(user)

    def delete_user_and_refresh(self, user: Identifier | User, query: PageQuery | None = None) -> UserList:
        """Delete, then re-list only once the delete has completed."""
        self.users.delete_user(user)
        return self.list_users(query or PageQuery())

    def update_user(self, user: User | dict[str, Any]) -> User:
        return self.users.update_user(user)

    # ---- Menu / orders

    def get_menu(self) -> list[MenuItem]:
        return self.orders.get_menu()

    def get_orders(self) -> OrderHistory:
        return self.orders.get_orders()

    def order(self, draft: OrderDraft | dict[str, Any]) -> OrderResponse:
        return self.orders.order(draft)

    def verify_order(self, proof_token: str) -> VerifyResponse:
        return self.orders.verify_order(proof_token)

    # ---- Franchises / stores

    def get_franchises(
        self, page: int | PageQuery = 0, limit: int = DEFAULT_LIMIT, name: str = WILDCARD
    ) -> FranchisePage:
        return self.franchises.get_franchises(page, limit, name)

    def list_franchises(
        self, page: int | PageQuery = 0, limit: int = DEFAULT_LIMIT, name: str = WILDCARD
    ) -> FranchiseList:
        return normalize_franchise_list(self.franchises.get_franchises(page, limit, name))

    def get_franchise(self, user: Identifier | User) -> list[FranchiseRecord]:
        return self.franchises.get_franchise(user)

    def create_franchise(self, franchise: FranchiseRecord | dict[str, Any]) -> FranchiseRecord:
        return self.franchises.create_franchise(franchise)

    def close_franchise(self, franchise: Identifier | FranchiseRecord) -> None:
        self.franchises.close_franchise(franchise)

    def create_store(self, franchise: Identifier | FranchiseRecord, store: Store | dict[str, Any]) -> Store:
        return self.franchises.create_store(franchise, store)

    def close_store(self, franchise: Identifier | FranchiseRecord, store: Identifier | Store) -> None:
        self.franchises.close_store(franchise, store)

    # ---- Docs

    def docs(self, kind: str = "service") -> Endpoints:
        return self.docs_client.docs(kind)

    def _auth_event(self, action: str, *, success: bool, error: ApiError | None = None) -> None:
        self.telemetry.emit(
            build_event(
                category="auth",
                name=f"auth_{action}",
                module="auth",
                action=action,
                success=success,
                error_code=error.code if error else None,
                status_code=error.status_code if error else None,
            )
        )
