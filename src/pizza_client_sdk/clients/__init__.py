from .auth import AuthClient
from .docs import DocsClient
from .franchises import FranchisesClient
from .orders import OrdersClient
from .users import UsersClient

__all__ = [
    "AuthClient",
    "DocsClient",
    "FranchisesClient",
    "OrdersClient",
    "UsersClient",
]
