from __future__ import annotations

import sys
from pathlib import Path

import pytest

BASE_DIR = Path(__file__).resolve().parents[1]
SDK_SRC = BASE_DIR / "src"
sys.path.insert(0, str(SDK_SRC))

from pizza_client_sdk.auth_store import MemoryAuthStore  # noqa: E402
from pizza_client_sdk.config import ClientConfig  # noqa: E402
from pizza_client_sdk.http_client import HttpClient  # noqa: E402
from pizza_client_sdk.service import PizzaService  # noqa: E402
from pizza_client_sdk.session import SessionStore  # noqa: E402

SERVICE_URL = "https://pizza-service.example.com"
FACTORY_URL = "https://pizza-factory.example.com"


@pytest.fixture
def config() -> ClientConfig:
    return ClientConfig(env_name="test", service_base_url=SERVICE_URL, factory_base_url=FACTORY_URL)


@pytest.fixture
def token_store() -> MemoryAuthStore:
    return MemoryAuthStore()


@pytest.fixture
def session_store(token_store: MemoryAuthStore) -> SessionStore:
    return SessionStore(token_store)


@pytest.fixture
def http(config: ClientConfig, session_store: SessionStore) -> HttpClient:
    return HttpClient(config=config, session_store=session_store)


@pytest.fixture
def service(config: ClientConfig, token_store: MemoryAuthStore) -> PizzaService:
    return PizzaService(config, token_store=token_store)
