from hotel_booking_api.api.schemas.auth_dto import LoginResponseDTO
from hotel_booking_api.api.schemas.envelopes import (
    ErrorResponseDTO,
    SuccessResponseDTO,
    ValidationErrorResponseDTO,
)
from hotel_booking_api.api.schemas.requests import (
    CREATE_ROOM_SCHEMA,
    LOGIN_WITH_EMAIL_AND_PASSWORD_SCHEMA,
    SIGN_UP_SCHEMA,
)
from hotel_booking_api.api.schemas.room_dto import RoomResponseDTO

__all__ = [
    "CREATE_ROOM_SCHEMA",
    "LOGIN_WITH_EMAIL_AND_PASSWORD_SCHEMA",
    "SIGN_UP_SCHEMA",
    "ErrorResponseDTO",
    "LoginResponseDTO",
    "RoomResponseDTO",
    "SuccessResponseDTO",
    "ValidationErrorResponseDTO",
]
