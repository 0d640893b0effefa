from __future__ import annotations

from ..config import Service
from ..models import Endpoints
from .base import BaseClient

FACTORY_DOCS = "factory"


class DocsClient(BaseClient):
    def docs(self, kind: str = "service") -> Endpoints:
        service = Service.FACTORY if kind == FACTORY_DOCS else Service.PIZZA
        data = self._request("GET", "/api/docs", service=service, operation=f"docs.{service.value}")
        return self._decode(Endpoints, data)
