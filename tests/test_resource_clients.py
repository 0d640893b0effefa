from __future__ import annotations

import json
from urllib.parse import parse_qs, urlparse

import pytest
import responses

from pizza_client_sdk.clients.docs import DocsClient
from pizza_client_sdk.clients.franchises import FranchisesClient
from pizza_client_sdk.clients.orders import OrdersClient
from pizza_client_sdk.exceptions import DecodeError
from pizza_client_sdk.http_client import HttpClient
from pizza_client_sdk.models import FranchiseRecord, OrderDraft, OrderItem, Store
from pizza_client_sdk.session import SessionStore

from conftest import FACTORY_URL, SERVICE_URL

MENU = [
    {"id": 1, "title": "Veggie", "image": "pizza1.png", "price": 0.0038, "description": "A garden of delight"},
    {"id": 2, "title": "Pepperoni", "image": "pizza2.png", "price": 0.0042, "description": "Spicy treat"},
]


@pytest.fixture
def orders(http: HttpClient, session_store: SessionStore) -> OrdersClient:
    session_store.set_token("diner-token")
    return OrdersClient(http=http, session=session_store)


@pytest.fixture
def franchises(http: HttpClient, session_store: SessionStore) -> FranchisesClient:
    session_store.set_token("admin-token")
    return FranchisesClient(http=http, session=session_store)


@responses.activate
def test_get_menu(orders: OrdersClient) -> None:
    responses.add(responses.GET, f"{SERVICE_URL}/api/order/menu", json=MENU, status=200)

    menu = orders.get_menu()

    assert [item.title for item in menu] == ["Veggie", "Pepperoni"]
    assert menu[1].price == pytest.approx(0.0042)


@responses.activate
def test_get_menu_rejects_negative_price(orders: OrdersClient) -> None:
    responses.add(
        responses.GET,
        f"{SERVICE_URL}/api/order/menu",
        json=[{"id": 1, "title": "Veggie", "price": -1}],
        status=200,
    )

    with pytest.raises(DecodeError) as excinfo:
        orders.get_menu()

    assert excinfo.value.code == "SCHEMA_MISMATCH"


@responses.activate
def test_get_orders(orders: OrdersClient) -> None:
    responses.add(
        responses.GET,
        f"{SERVICE_URL}/api/order",
        json={
            "dinerId": 4,
            "orders": [
                {
                    "id": 1,
                    "franchiseId": 1,
                    "storeId": 1,
                    "date": "2024-06-05T05:14:40.000Z",
                    "items": [{"id": 1, "menuId": 1, "description": "Veggie", "price": 0.05}],
                }
            ],
            "page": 1,
        },
        status=200,
    )

    history = orders.get_orders()

    assert history.diner_id == 4
    assert history.orders[0].items[0].menu_id == 1
    assert responses.calls[0].request.headers["Authorization"] == "Bearer diner-token"


@responses.activate
def test_order_posts_draft_and_returns_proof_token(orders: OrdersClient) -> None:
    responses.add(
        responses.POST,
        f"{SERVICE_URL}/api/order",
        json={
            "order": {"id": 23, "franchiseId": 1, "storeId": 1, "items": [{"menuId": 1, "description": "Veggie", "price": 0.05}]},
            "jwt": "proof.jwt.token",
        },
        status=200,
    )
    draft = OrderDraft(
        items=[OrderItem(menu_id=1, description="Veggie", price=0.05)],
        store_id=1,
        franchise_id=1,
    )

    result = orders.order(draft)

    assert result.order.id == 23
    assert result.jwt == "proof.jwt.token"
    assert json.loads(responses.calls[0].request.body) == {
        "items": [{"menuId": 1, "description": "Veggie", "price": 0.05}],
        "storeId": 1,
        "franchiseId": 1,
    }


@responses.activate
def test_verify_order_uses_factory_service(orders: OrdersClient) -> None:
    responses.add(
        responses.POST,
        f"{FACTORY_URL}/api/order/verify",
        json={"message": "valid", "payload": {"vendor": {"id": "student"}}},
        status=200,
    )

    result = orders.verify_order("proof.jwt.token")

    assert result.message == "valid"
    assert json.loads(responses.calls[0].request.body) == {"jwt": "proof.jwt.token"}


@responses.activate
def test_get_franchises_keeps_zero_based_page(franchises: FranchisesClient) -> None:
    responses.add(
        responses.GET,
        f"{SERVICE_URL}/api/franchise",
        json={"franchises": [{"id": 1, "name": "pizzaPocket"}], "more": True},
        status=200,
    )

    page = franchises.get_franchises(0, 10, "*")

    query = parse_qs(urlparse(responses.calls[0].request.url).query)
    assert query == {"page": ["0"], "limit": ["10"], "name": ["*"]}
    assert page.franchises is not None
    assert page.franchises[0].admins is None
    assert page.more is True


@responses.activate
def test_get_franchise_for_user(franchises: FranchisesClient) -> None:
    responses.add(
        responses.GET,
        f"{SERVICE_URL}/api/franchise/4",
        json=[{"id": 2, "name": "pizzaPocket", "admins": [{"id": 4, "name": "pizza franchisee", "email": "f@jwt.com"}], "stores": [{"id": 4, "name": "SLC", "totalRevenue": 0}]}],
        status=200,
    )

    result = franchises.get_franchise(4)

    assert result[0].stores is not None
    assert result[0].stores[0].total_revenue == 0


@responses.activate
def test_franchise_and_store_mutations(franchises: FranchisesClient) -> None:
    responses.add(
        responses.POST,
        f"{SERVICE_URL}/api/franchise",
        json={"id": 5, "name": "pizzaPocket", "admins": [{"email": "f@jwt.com", "id": 4, "name": "pizza franchisee"}]},
        status=200,
    )
    responses.add(responses.POST, f"{SERVICE_URL}/api/franchise/5/store", json={"id": 9, "name": "SLC"}, status=200)
    responses.add(responses.DELETE, f"{SERVICE_URL}/api/franchise/5/store/9", json={"message": "store deleted"}, status=200)
    responses.add(responses.DELETE, f"{SERVICE_URL}/api/franchise/5", json={"message": "franchise deleted"}, status=200)

    created = franchises.create_franchise({"name": "pizzaPocket", "admins": [{"email": "f@jwt.com"}]})
    store = franchises.create_store(created, Store(name="SLC"))
    assert franchises.close_store(created, store) is None
    assert franchises.close_franchise(FranchiseRecord(id=5, name="pizzaPocket")) is None

    assert created.id == 5
    assert store.id == 9
    assert json.loads(responses.calls[1].request.body) == {"name": "SLC"}
    assert [call.request.method for call in responses.calls] == ["POST", "POST", "DELETE", "DELETE"]


def test_close_franchise_requires_identifier(franchises: FranchisesClient) -> None:
    with pytest.raises(ValueError):
        franchises.close_franchise(FranchiseRecord(name="no id yet"))


@responses.activate
@pytest.mark.parametrize(("kind", "base"), [("factory", FACTORY_URL), ("service", SERVICE_URL)])
def test_docs_selects_base_by_kind(http: HttpClient, session_store: SessionStore, kind: str, base: str) -> None:
    responses.add(
        responses.GET,
        f"{base}/api/docs",
        json={"version": "20240518.154317", "endpoints": [{"method": "GET", "path": "/api/order/menu"}]},
        status=200,
    )

    docs = DocsClient(http=http, session=session_store).docs(kind)

    assert docs.endpoints[0]["path"] == "/api/order/menu"
    assert responses.calls[0].request.url == f"{base}/api/docs"
