from __future__ import annotations

from typing import Any, Sequence, TypeVar

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError

from contacts_api.core.exceptions import FieldError

_LOCATIONS = {"body", "query", "path", "header", "cookie"}

ModelT = TypeVar("ModelT", bound=BaseModel)


def _field_name(loc: Sequence[Any]) -> str:
    parts = [str(part) for part in loc]
    if len(parts) > 1 and parts[0] in _LOCATIONS:
        parts = parts[1:]
    return ".".join(parts)


def _reason(error: dict[str, Any], field: str) -> str:
    kind = error.get("type")
    ctx = error.get("ctx") or {}
    if kind == "missing":
        return f"The {field} field is required."
    if kind == "string_type":
        return f"The {field} field must be a string."
    if kind == "string_too_long":
        return f"The {field} field must not be greater than {ctx.get('max_length')} characters."
    if kind == "value_error" and "error" in ctx:
        return str(ctx["error"])
    return str(error.get("msg", "Invalid value."))


def field_errors_from_request(exc: RequestValidationError) -> list[FieldError]:
    errors: list[FieldError] = []
    for error in exc.errors():
        field = _field_name(error.get("loc", ()))
        errors.append(FieldError(field, _reason(error, field)))
    return errors


def validate_body(model: type[ModelT], data: dict[str, Any]) -> ModelT:
    """Validate ``data`` as a request body, failing like FastAPI's own body parsing."""
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        errors = [{**error, "loc": ("body", *error["loc"])} for error in exc.errors()]
        raise RequestValidationError(errors, body=data) from exc


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    detail = [error.as_dict() for error in field_errors_from_request(exc)]
    return JSONResponse(
        status_code=422,
        content=jsonable_encoder({"detail": detail}),
    )
