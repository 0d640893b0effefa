from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Callable, TypeVar

from dotenv import load_dotenv

NumberT = TypeVar("NumberT", int, float)


class ConfigError(ValueError):
    pass


class Service(str, Enum):
    """Backend a relative path is resolved against."""

    PIZZA = "pizza"
    FACTORY = "factory"


@dataclass(frozen=True)
class ClientConfig:
    env_name: str
    service_base_url: str
    factory_base_url: str
    connect_timeout_seconds: float = 5.0
    read_timeout_seconds: float = 10.0
    max_connections: int = 10
    verify_ssl: bool = True
    app_name: str = "pizza-client"

    @property
    def normalized_env(self) -> str:
        return self.env_name.lower().strip()

    def base_url_for(self, service: Service) -> str:
        if service is Service.FACTORY:
            return self.factory_base_url
        return self.service_base_url


def _read_positive(name: str, default: NumberT, cast: Callable[[str], NumberT]) -> NumberT:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = cast(raw.strip())
    except ValueError as exc:
        raise ConfigError(f"Invalid {name}: expected a number, got {raw!r}") from exc
    if value <= 0:
        raise ConfigError(f"Invalid {name}: expected > 0, got {value}")
    return value


def _profile_url(name: str, env_key: str) -> str:
    value = (os.getenv(f"{name}_{env_key}") or os.getenv(name) or "").strip()
    if not value:
        raise ConfigError(f"Missing required config value: {name}")
    return value.rstrip("/")


def load_config(env_file: str | None = None) -> ClientConfig:
    """Load config from environment with optional .env override.

    Base URLs resolve per profile first (``PIZZA_SERVICE_URL_STAGING`` when
    ``PIZZA_ENV=staging``) and fall back to the unsuffixed variable.
    """
    load_dotenv(env_file)

    env_name = (os.getenv("PIZZA_ENV") or "dev").strip()
    env_key = env_name.upper()

    service_base_url = _profile_url("PIZZA_SERVICE_URL", env_key)
    factory_base_url = _profile_url("PIZZA_FACTORY_URL", env_key)

    return ClientConfig(
        env_name=env_name,
        service_base_url=service_base_url,
        factory_base_url=factory_base_url,
        connect_timeout_seconds=_read_positive("PIZZA_CONNECT_TIMEOUT_SECONDS", 5.0, float),
        read_timeout_seconds=_read_positive("PIZZA_TIMEOUT_SECONDS", 10.0, float),
        max_connections=_read_positive("PIZZA_MAX_CONNECTIONS", 10, int),
        verify_ssl=(os.getenv("PIZZA_VERIFY_SSL") or "true").strip().lower() in {"1", "true", "yes", "on"},
        app_name=(os.getenv("PIZZA_APP_NAME") or "pizza-client").strip(),
    )
