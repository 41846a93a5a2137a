from http import HTTPStatus
from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from hotel_booking_api.api import responses
from hotel_booking_api.api.binding import bind_json_body
from hotel_booking_api.api.dependencies import ContainerDependency, get_field_validator
from hotel_booking_api.api.schemas import (
    LOGIN_WITH_EMAIL_AND_PASSWORD_SCHEMA,
    SIGN_UP_SCHEMA,
    ErrorResponseDTO,
    LoginResponseDTO,
    SuccessResponseDTO,
    ValidationErrorResponseDTO,
)
from hotel_booking_api.api.validation import FieldValidator
from hotel_booking_api.application import (
    LoginError,
    LoginWithEmailAndPasswordRequest,
    LoginWithEmailAndPasswordUseCase,
    SignUpError,
    SignUpErrorKind,
    SignUpRequest,
    SignUpUseCase,
)

router = APIRouter(tags=["auth"])

_SIGN_UP_ERRORS: dict[SignUpErrorKind, tuple[HTTPStatus, str]] = {
    SignUpErrorKind.NAME_TOO_SHORT: (
        HTTPStatus.BAD_REQUEST,
        SignUpErrorKind.NAME_TOO_SHORT.value,
    ),
    SignUpErrorKind.PASSWORD_TOO_SHORT: (
        HTTPStatus.BAD_REQUEST,
        SignUpErrorKind.PASSWORD_TOO_SHORT.value,
    ),
    SignUpErrorKind.EMAIL_INVALID: (
        HTTPStatus.BAD_REQUEST,
        "email address is invalid. Please enter a valid email address",
    ),
    SignUpErrorKind.EMAIL_ALREADY_IN_USE: (
        HTTPStatus.CONFLICT,
        "this email address is already in use. "
        "Please use a different email or login to your existing account",
    ),
}


def get_sign_up_use_case(container: ContainerDependency) -> SignUpUseCase:
    return container.create_sign_up_use_case()


def get_login_with_email_and_password_use_case(
    container: ContainerDependency,
) -> LoginWithEmailAndPasswordUseCase:
    return container.create_login_with_email_and_password_use_case()


@router.post(
    "/sign-up",
    status_code=HTTPStatus.CREATED,
    summary="Sign up",
    description="Register a customer account with name, email and password.",
    responses={
        201: {"model": SuccessResponseDTO, "description": "Customer created"},
        400: {"model": ValidationErrorResponseDTO, "description": "Invalid request body"},
        409: {"model": ErrorResponseDTO, "description": "Email already in use"},
        500: {"model": ErrorResponseDTO, "description": "Internal server error"},
    },
)
async def sign_up(
    request: Request,
    use_case: Annotated[SignUpUseCase, Depends(get_sign_up_use_case)],
    validator: Annotated[FieldValidator, Depends(get_field_validator)],
) -> JSONResponse:
    payload = await bind_json_body(request)
    if payload is None:
        return responses.bad_request_validation([responses.CONTENT_TYPE_ERROR_MESSAGE])

    errors = validator.validate(payload, SIGN_UP_SCHEMA)
    if errors:
        return responses.bad_request_validation(errors)

    try:
        await use_case.execute(
            SignUpRequest(
                name=payload["name"],
                email=payload["email"],
                password=payload["password"],
            )
        )
    except SignUpError as exc:
        status, message = _SIGN_UP_ERRORS[exc.kind]
        return responses.error(status, message)

    return responses.created("customer sign up successfully")


@router.post(
    "/login-with-email-and-password",
    summary="Log in with email and password",
    description="Check credentials and return a signed access token valid for 30 days.",
    responses={
        200: {"model": SuccessResponseDTO, "description": "Access token issued"},
        400: {"model": ValidationErrorResponseDTO, "description": "Invalid request body"},
        401: {"model": ErrorResponseDTO, "description": "Wrong email or password"},
        500: {"model": ErrorResponseDTO, "description": "Internal server error"},
    },
)
async def login_with_email_and_password(
    request: Request,
    use_case: Annotated[
        LoginWithEmailAndPasswordUseCase,
        Depends(get_login_with_email_and_password_use_case),
    ],
    validator: Annotated[FieldValidator, Depends(get_field_validator)],
) -> JSONResponse:
    payload = await bind_json_body(request)
    if payload is None:
        return responses.bad_request_validation([responses.CONTENT_TYPE_ERROR_MESSAGE])

    errors = validator.validate(payload, LOGIN_WITH_EMAIL_AND_PASSWORD_SCHEMA)
    if errors:
        return responses.bad_request_validation(errors)

    try:
        result = await use_case.execute(
            LoginWithEmailAndPasswordRequest(
                email=payload["email"],
                plain_password=payload["password"],
            )
        )
    except LoginError as exc:
        return responses.unauthorized(str(exc))

    body = LoginResponseDTO(
        customer_id=result.customer_id,
        customer_name=result.customer_name,
        access_token=result.access_token,
    )
    return responses.ok(body.model_dump(mode="json", by_alias=True))
