from hotel_booking_api.application.use_cases.create_room_use_case import (
    CreateRoomError,
    CreateRoomErrorKind,
    CreateRoomRequest,
    CreateRoomUseCase,
)
from hotel_booking_api.application.use_cases.list_rooms_use_case import ListRoomsUseCase
from hotel_booking_api.application.use_cases.login_with_email_and_password_use_case import (
    JWT_SIGNING_SECRET_KEY,
    LoginError,
    LoginErrorKind,
    LoginWithEmailAndPasswordRequest,
    LoginWithEmailAndPasswordResult,
    LoginWithEmailAndPasswordUseCase,
)
from hotel_booking_api.application.use_cases.sign_up_use_case import (
    SignUpError,
    SignUpErrorKind,
    SignUpRequest,
    SignUpUseCase,
)

__all__ = [
    "CreateRoomError",
    "CreateRoomErrorKind",
    "CreateRoomRequest",
    "CreateRoomUseCase",
    "JWT_SIGNING_SECRET_KEY",
    "ListRoomsUseCase",
    "LoginError",
    "LoginErrorKind",
    "LoginWithEmailAndPasswordRequest",
    "LoginWithEmailAndPasswordResult",
    "LoginWithEmailAndPasswordUseCase",
    "SignUpError",
    "SignUpErrorKind",
    "SignUpRequest",
    "SignUpUseCase",
]
