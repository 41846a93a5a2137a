from http import HTTPStatus
from typing import Any

from fastapi.responses import JSONResponse

from hotel_booking_api.api.schemas import (
    ErrorResponseDTO,
    SuccessResponseDTO,
    ValidationErrorResponseDTO,
)

INTERNAL_SERVER_ERROR_MESSAGE = "something went wrong. Please try again later"
CONTENT_TYPE_ERROR_MESSAGE = "content-type must be application/json"
MISSING_TOKEN_MESSAGE = "missing or invalid authorization token"
FORBIDDEN_MESSAGE = "you do not have permission to access this resource"


def success(status: HTTPStatus, data: Any = None) -> JSONResponse:
    body = SuccessResponseDTO(status_code=status.value, status_text=status.name, data=data)
    return JSONResponse(status_code=status.value, content=body.model_dump(mode="json", by_alias=True))


def error(status: HTTPStatus, message: str) -> JSONResponse:
    body = ErrorResponseDTO(status_code=status.value, status_text=status.name, error=message)
    return JSONResponse(status_code=status.value, content=body.model_dump(by_alias=True))


def ok(data: Any = None) -> JSONResponse:
    return success(HTTPStatus.OK, data)


def created(data: Any = None) -> JSONResponse:
    return success(HTTPStatus.CREATED, data)


def bad_request_validation(messages: list[str]) -> JSONResponse:
    body = ValidationErrorResponseDTO(
        status_code=HTTPStatus.BAD_REQUEST.value,
        status_text=HTTPStatus.BAD_REQUEST.name,
        errors=messages,
    )
    return JSONResponse(
        status_code=HTTPStatus.BAD_REQUEST.value,
        content=body.model_dump(by_alias=True),
    )


def bad_request(message: str) -> JSONResponse:
    return error(HTTPStatus.BAD_REQUEST, message)


def unauthorized(message: str = MISSING_TOKEN_MESSAGE) -> JSONResponse:
    return error(HTTPStatus.UNAUTHORIZED, message)


def forbidden(message: str = FORBIDDEN_MESSAGE) -> JSONResponse:
    return error(HTTPStatus.FORBIDDEN, message)


def conflict(message: str) -> JSONResponse:
    return error(HTTPStatus.CONFLICT, message)


def internal_server_error() -> JSONResponse:
    return error(HTTPStatus.INTERNAL_SERVER_ERROR, INTERNAL_SERVER_ERROR_MESSAGE)
