from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

DEFAULT_LIMIT = 10
WILDCARD = "*"


@dataclass(frozen=True)
class PageQuery:
    """Zero-based page request shared by the user and franchise listings.

    The two endpoints disagree on the wire: ``/api/user`` counts pages from 1,
    ``/api/franchise`` from 0. Callers always think in zero-based pages and
    pick the matching ``to_*_params`` serializer.
    """

    page: int = 0
    limit: int = DEFAULT_LIMIT
    name: str = WILDCARD

    def __post_init__(self) -> None:
        if self.page < 0:
            raise ValueError(f"page must be >= 0, got {self.page}")
        if self.limit < 1:
            raise ValueError(f"limit must be >= 1, got {self.limit}")
        if not self.name or not self.name.strip():
            object.__setattr__(self, "name", WILDCARD)

    def to_user_params(self) -> dict[str, Any]:
        return {"page": self.page + 1, "limit": self.limit, "name": self.name}

    def to_franchise_params(self) -> dict[str, Any]:
        return {"page": self.page, "limit": self.limit, "name": self.name}


def next_page(query: PageQuery, more: bool | None) -> PageQuery:
    if not more:
        return query
    return replace(query, page=query.page + 1)


def prev_page(query: PageQuery) -> PageQuery:
    return replace(query, page=max(0, query.page - 1))


def wildcard_filter(text: str | None) -> str:
    cleaned = (text or "").strip()
    return f"{WILDCARD}{cleaned}{WILDCARD}" if cleaned else WILDCARD
