from .auth_store import AuthStore, MemoryAuthStore, TokenStore
from .config import ClientConfig, ConfigError, Service, load_config
from .exceptions import (
    ApiError,
    AuthError,
    ConflictError,
    DecodeError,
    ForbiddenError,
    HttpError,
    NetworkError,
    NotFoundError,
    ServerError,
    SessionStateError,
)
from .http_client import HttpClient
from .models import (
    Franchise,
    FranchiseList,
    FranchisePage,
    MenuItem,
    Order,
    OrderDraft,
    OrderItem,
    OrderResponse,
    Role,
    RoleAssignment,
    Session,
    Store,
    User,
    UserList,
    UserPage,
)
from .normalizers import normalize_franchise_list, normalize_user_list
from .pagination import PageQuery, wildcard_filter
from .roles import is_franchisee_of, is_role
from .service import PizzaService
from .session import SessionStore
from .session_flow import SessionFlow, SessionPhase
from .ui_errors import UserFacingError, to_user_facing_error

__version__ = "0.1.0"

__all__ = [
    "ApiError",
    "AuthError",
    "AuthStore",
    "ClientConfig",
    "ConfigError",
    "ConflictError",
    "DecodeError",
    "ForbiddenError",
    "Franchise",
    "FranchiseList",
    "FranchisePage",
    "HttpClient",
    "HttpError",
    "MemoryAuthStore",
    "MenuItem",
    "NetworkError",
    "NotFoundError",
    "Order",
    "OrderDraft",
    "OrderItem",
    "OrderResponse",
    "PageQuery",
    "PizzaService",
    "Role",
    "RoleAssignment",
    "ServerError",
    "Service",
    "Session",
    "SessionFlow",
    "SessionPhase",
    "SessionStateError",
    "SessionStore",
    "Store",
    "TokenStore",
    "User",
    "UserList",
    "UserFacingError",
    "UserPage",
    "is_franchisee_of",
    "is_role",
    "load_config",
    "normalize_franchise_list",
    "normalize_user_list",
    "to_user_facing_error",
    "wildcard_filter",
]
