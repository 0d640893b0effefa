from __future__ import annotations

from typing import Any

from ..config import Service
from ..models import MenuItem, OrderDraft, OrderHistory, OrderResponse, VerifyResponse
from .base import BaseClient, body_of


class OrdersClient(BaseClient):
    def get_menu(self) -> list[MenuItem]:
        data = self._request("GET", "/api/order/menu", operation="orders.menu")
        return self._decode_list(MenuItem, data)

    def get_orders(self) -> OrderHistory:
        data = self._request("GET", "/api/order", operation="orders.history")
        return self._decode(OrderHistory, data)

    def order(self, draft: OrderDraft | dict[str, Any]) -> OrderResponse:
        """Submit a draft; the response carries the order and its proof token."""
        if not isinstance(draft, OrderDraft):
            draft = OrderDraft.model_validate(draft)
        data = self._request("POST", "/api/order", json_body=body_of(draft), operation="orders.create")
        return self._decode(OrderResponse, data)

    def verify_order(self, proof_token: str) -> VerifyResponse:
        data = self._request(
            "POST",
            "/api/order/verify",
            json_body={"jwt": proof_token},
            service=Service.FACTORY,
            operation="orders.verify",
        )
        return self._decode(VerifyResponse, data)
