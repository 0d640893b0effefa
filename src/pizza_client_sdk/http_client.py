from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass
from typing import Any
from urllib.parse import urljoin

import requests
from requests.adapters import HTTPAdapter

from .config import ClientConfig, Service
from .error_mapper import map_error
from .exceptions import DecodeError, NetworkError
from .session import SessionStore

logger = logging.getLogger(__name__)

JsonPayload = Any


@dataclass
class LastOperation:
    module: str
    operation: str
    duration_ms: int
    result: str
    status_code: int


@dataclass
class HttpClient:
    """Single gateway for every call to the pizza and factory services.

    Attaches the JSON content type and, when the session holds one, the bearer
    token; parses the body; classifies failures into ``NetworkError``,
    ``DecodeError`` or an ``HttpError`` subtype. It never retries and never
    recovers a failure itself.
    """

    config: ClientConfig
    session_store: SessionStore
    session: requests.Session | None = None
    last_operation: LastOperation | None = None

    def __post_init__(self) -> None:
        if self.session is None:
            self.session = requests.Session()
            adapter = HTTPAdapter(
                pool_connections=self.config.max_connections,
                pool_maxsize=self.config.max_connections,
            )
            self.session.mount("http://", adapter)
            self.session.mount("https://", adapter)

    def build_url(self, path: str, service: Service = Service.PIZZA) -> str:
        if path.startswith(("http://", "https://")):
            return path
        base = self.config.base_url_for(service).rstrip("/") + "/"
        return urljoin(base, path.lstrip("/"))

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json", "Accept": "application/json"}
        token = self.session_store.token
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def request(
        self,
        method: str,
        path: str,
        *,
        json_body: Any = None,
        params: dict[str, Any] | None = None,
        service: Service = Service.PIZZA,
        module: str = "unknown",
        operation: str = "unknown",
    ) -> JsonPayload:
        if self.session is None:
            raise RuntimeError("HTTP session not initialized")
        normalized_method = method.upper()
        url = self.build_url(path, service)
        data = json.dumps(json_body) if json_body is not None else None

        started = time.monotonic()
        try:
            response = self.session.request(
                method=normalized_method,
                url=url,
                headers=self._headers(),
                data=data,
                params=params,
                timeout=(self.config.connect_timeout_seconds, self.config.read_timeout_seconds),
                verify=self.config.verify_ssl,
            )
        except requests.RequestException as exc:
            self._record_operation(module, operation, started, "network_error", 0)
            logger.warning(
                "request_failed",
                extra={"method": normalized_method, "url": url, "error_type": type(exc).__name__},
            )
            raise NetworkError(
                code="NETWORK_ERROR",
                message=str(exc) or "Network error",
                status_code=0,
                details={"type": type(exc).__name__},
            ) from exc

        status = response.status_code
        if status == 204:
            self._record_operation(module, operation, started, "success", status)
            return {}

        try:
            payload = self._parse_body(response)
        except DecodeError:
            self._record_operation(module, operation, started, "decode_error", status)
            raise
        if not 200 <= status < 300:
            self._record_operation(module, operation, started, "error", status)
            logger.warning(
                "request_failed",
                extra={"method": normalized_method, "url": url, "status_code": status},
            )
            raise map_error(status, payload)

        self._record_operation(module, operation, started, "success", status)
        logger.debug("request_ok", extra={"method": normalized_method, "url": url, "status_code": status})
        return payload

    def _parse_body(self, response: requests.Response) -> JsonPayload:
        text = response.text
        if not text or not text.strip():
            return {}
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise DecodeError(
                code="DECODE_ERROR",
                message="Response body is not valid JSON",
                status_code=response.status_code,
                details={"error": str(exc)},
                raw_payload=text,
            ) from exc

    def _record_operation(self, module: str, operation: str, started: float, result: str, status_code: int) -> None:
        self.last_operation = LastOperation(
            module=module,
            operation=operation,
            duration_ms=int((time.monotonic() - started) * 1000),
            result=result,
            status_code=status_code,
        )
