from __future__ import annotations

from enum import Enum
from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

Identifier = Union[int, str]


class Role(str, Enum):
    DINER = "diner"
    ADMIN = "admin"
    FRANCHISEE = "franchisee"


class RoleAssignment(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    role: Role
    object_id: Identifier | None = Field(default=None, alias="objectId")


class User(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: Identifier | None = None
    name: str | None = None
    email: str | None = None
    password: str | None = None
    roles: List[RoleAssignment] | None = None


class AuthResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    user: User
    token: str


class MenuItem(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: Identifier
    title: str
    image: str | None = None
    price: float = Field(ge=0)
    description: str | None = None


class OrderItem(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    menu_id: Identifier = Field(alias="menuId")
    description: str
    price: float = Field(ge=0)


class OrderDraft(BaseModel):
    """Client-built order; the server assigns its id on submission."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    items: List[OrderItem] = Field(default_factory=list)
    store_id: Identifier = Field(alias="storeId")
    franchise_id: Identifier = Field(alias="franchiseId")


class Order(OrderDraft):
    id: Identifier
    date: str | None = None


class OrderResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    order: Order
    jwt: str


class OrderHistory(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: Identifier | None = None
    diner_id: Identifier | None = Field(default=None, alias="dinerId")
    orders: List[Order] = Field(default_factory=list)
    page: int | None = None


class VerifyResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    message: str | None = None
    payload: Any = None


class FranchiseAdmin(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: Identifier | None = None
    name: str | None = None
    email: str | None = None


class Store(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: Identifier | None = None
    name: str | None = None
    total_revenue: float | None = Field(default=None, ge=0, alias="totalRevenue")


class FranchiseRecord(BaseModel):
    """Franchise as the backend sends it: collections may be omitted."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: Identifier | None = None
    name: str | None = None
    admins: Optional[List[FranchiseAdmin]] = None
    stores: Optional[List[Store]] = None


class Franchise(FranchiseRecord):
    admins: List[FranchiseAdmin] = Field(default_factory=list)
    stores: List[Store] = Field(default_factory=list)


class FranchisePage(BaseModel):
    model_config = ConfigDict(extra="allow")

    franchises: Optional[List[FranchiseRecord]] = None
    more: bool | None = None


class UserPage(BaseModel):
    model_config = ConfigDict(extra="allow")

    users: Optional[List[User]] = None
    more: bool | None = None

    @model_validator(mode="before")
    @classmethod
    def _accept_bare_list(cls, data: Any) -> Any:
        if isinstance(data, list):
            return {"users": data}
        return data


class FranchiseList(BaseModel):
    franchises: List[Franchise] = Field(default_factory=list)
    more: bool = False


class UserList(BaseModel):
    users: List[User] = Field(default_factory=list)
    more: bool = False


class Endpoints(BaseModel):
    model_config = ConfigDict(extra="allow")

    version: str | None = None
    endpoints: List[dict[str, Any]] = Field(default_factory=list)
    config: dict[str, Any] | None = None


class Session(BaseModel):
    model_config = ConfigDict(frozen=True)

    token: str | None = None
    user: User | None = None
