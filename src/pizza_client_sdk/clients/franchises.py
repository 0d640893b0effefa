from __future__ import annotations

from typing import Any

from ..models import Franchise, FranchisePage, FranchiseRecord, Identifier, Store, User
from ..pagination import DEFAULT_LIMIT, WILDCARD, PageQuery
from .base import BaseClient, body_of, id_of


class FranchisesClient(BaseClient):
    def get_franchises(
        self,
        page: int | PageQuery = 0,
        limit: int = DEFAULT_LIMIT,
        name: str = WILDCARD,
    ) -> FranchisePage:
        # zero-based on the wire, unlike /api/user
        query = page if isinstance(page, PageQuery) else PageQuery(page=page, limit=limit, name=name)
        data = self._request(
            "GET",
            "/api/franchise",
            params=query.to_franchise_params(),
            operation="franchises.list",
        )
        return self._decode(FranchisePage, data)

    def get_franchise(self, user: Identifier | User) -> list[FranchiseRecord]:
        data = self._request("GET", f"/api/franchise/{id_of(user)}", operation="franchises.by_user")
        return self._decode_list(FranchiseRecord, data)

    def create_franchise(self, franchise: Franchise | FranchiseRecord | dict[str, Any]) -> FranchiseRecord:
        data = self._request("POST", "/api/franchise", json_body=body_of(franchise), operation="franchises.create")
        return self._decode(FranchiseRecord, data)

    def close_franchise(self, franchise: Identifier | FranchiseRecord) -> None:
        self._request("DELETE", f"/api/franchise/{id_of(franchise)}", operation="franchises.close")

    def create_store(self, franchise: Identifier | FranchiseRecord, store: Store | dict[str, Any]) -> Store:
        data = self._request(
            "POST",
            f"/api/franchise/{id_of(franchise)}/store",
            json_body=body_of(store),
            operation="stores.create",
        )
        return self._decode(Store, data)

    def close_store(self, franchise: Identifier | FranchiseRecord, store: Identifier | Store) -> None:
        self._request(
            "DELETE",
            f"/api/franchise/{id_of(franchise)}/store/{id_of(store)}",
            operation="stores.close",
        )
