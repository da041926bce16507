"""Turn failures into JSON error bodies and HTTP status codes."""

from __future__ import annotations

from typing import Any

from .dto import ValidationError
from .errors import AppError, ErrorStatus

Response = tuple[dict[str, Any], int]

_HTTP_STATUS: dict[ErrorStatus, int] = {
    ErrorStatus.BAD_REQUEST: 400,
    ErrorStatus.NOT_FOUND: 404,
    ErrorStatus.CONFLICT: 409,
    ErrorStatus.FAILED_PRECONDITION: 412,
    ErrorStatus.INTERNAL: 500,
}


def http_status(code: ErrorStatus | int) -> int:
    """Return the HTTP status code for an error category."""
    return _HTTP_STATUS[ErrorStatus(code)]


def invalid_request_body() -> Response:
    """Response for a body that could not be decoded."""
    return {"error": "invalid request body"}, 400


def validation_error(err: BaseException) -> Response:
    """Response describing which fields failed which rules."""
    if isinstance(err, ValidationError):
        errors = {
            name: f"field {name} validation failed: {rule}" for name, rule in err.failures.items()
        }
    else:
        errors = {"error": "invalid input"}
    return {"errors": errors}, 400


def use_case_error(err: AppError) -> Response:
    """Response for an error raised by a use case."""
    return {"error": err.message}, http_status(err.code)