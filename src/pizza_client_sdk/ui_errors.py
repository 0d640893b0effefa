from __future__ import annotations

from dataclasses import dataclass

from .exceptions import ApiError, DecodeError, NetworkError


@dataclass(frozen=True)
class UserFacingError:
    """Message a view can show, plus the detail line for its expander."""

    message: str
    details: str | None = None

    @property
    def technical_details(self) -> str | None:
        return self.details or None


def to_user_facing_error(exc: ApiError) -> UserFacingError:
    if isinstance(exc, NetworkError):
        return UserFacingError(message="Network error", details=exc.message or None)
    if isinstance(exc, DecodeError):
        return UserFacingError(message="Unexpected response from the server", details=f"{exc.code}: {exc.message}")
    details = f"{exc.code} (HTTP {exc.status_code})"
    if exc.details:
        details = f"{details}: {exc.details}"
    return UserFacingError(message=exc.message.strip() or f"HTTP {exc.status_code}", details=details)
