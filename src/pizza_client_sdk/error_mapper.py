from __future__ import annotations

from typing import Any

from .exceptions import (
    AuthError,
    ConflictError,
    ForbiddenError,
    HttpError,
    NotFoundError,
    ServerError,
)


def extract_message(status_code: int, payload: Any) -> str:
    if isinstance(payload, dict):
        message = payload.get("message")
        if message:
            return str(message)
    return f"HTTP {status_code}"


def map_error(status_code: int, payload: Any) -> HttpError:
    message = extract_message(status_code, payload)
    details = payload.get("stack") if isinstance(payload, dict) else None
    mapped: type[HttpError]
    if status_code == 401:
        mapped = AuthError
    elif status_code == 403:
        mapped = ForbiddenError
    elif status_code == 404:
        mapped = NotFoundError
    elif status_code == 409:
        mapped = ConflictError
    elif status_code >= 500:
        mapped = ServerError
    else:
        mapped = HttpError
    return mapped(
        code=f"HTTP_{status_code}",
        message=message,
        status_code=status_code,
        details=details,
        raw_payload=payload,
    )
