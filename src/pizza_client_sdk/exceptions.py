from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ApiError(Exception):
    code: str
    message: str
    status_code: int
    details: object | None = None
    raw_payload: object | None = None

    def __str__(self) -> str:
        return f"[{self.status_code}] {self.code}: {self.message}"


class NetworkError(ApiError):
    """Transport failure before an HTTP response was returned."""


class DecodeError(ApiError):
    """Response body was not JSON, or did not match the expected schema."""


class HttpError(ApiError):
    """The server answered with a non-2xx status."""


class AuthError(HttpError):
    """401: credentials rejected or session no longer valid."""


class ForbiddenError(HttpError):
    pass


class NotFoundError(HttpError):
    pass


class ConflictError(HttpError):
    pass


class ServerError(HttpError):
    """5xx server-side failures."""


class SessionStateError(RuntimeError):
    """A session operation was attempted from a state that does not allow it."""
