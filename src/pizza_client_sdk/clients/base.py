from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from ..exceptions import DecodeError
from ..http_client import HttpClient
from ..models import Identifier
from ..session import SessionStore

ModelT = TypeVar("ModelT", bound=BaseModel)


@dataclass
class BaseClient:
    http: HttpClient
    session: SessionStore
    module: str = "pizza"

    def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        kwargs.setdefault("module", self.module)
        return self.http.request(method, path, **kwargs)

    def _decode(self, model_type: type[ModelT], payload: Any) -> ModelT:
        try:
            return model_type.model_validate(payload)
        except ValidationError as exc:
            raise _decode_error(model_type.__name__, payload, exc) from exc

    def _decode_list(self, model_type: type[ModelT], payload: Any) -> list[ModelT]:
        try:
            return TypeAdapter(list[model_type]).validate_python(payload)  # type: ignore[valid-type]
        except ValidationError as exc:
            raise _decode_error(f"list[{model_type.__name__}]", payload, exc) from exc


def body_of(value: BaseModel | dict[str, Any]) -> dict[str, Any]:
    if isinstance(value, BaseModel):
        return value.model_dump(by_alias=True, exclude_none=True, mode="json")
    return dict(value)


def id_of(value: Any) -> Identifier:
    if isinstance(value, (int, str)):
        return value
    if isinstance(value, dict):
        identifier = value.get("id")
    else:
        identifier = getattr(value, "id", None)
    if identifier is None:
        raise ValueError(f"{type(value).__name__} has no id")
    return identifier


def _decode_error(expected: str, payload: Any, exc: ValidationError) -> DecodeError:
    return DecodeError(
        code="SCHEMA_MISMATCH",
        message=f"Response does not match {expected}",
        status_code=200,
        details=exc.errors(include_url=False),
        raw_payload=payload,
    )
