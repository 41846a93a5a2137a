from hotel_booking_api.application.use_cases import (
    JWT_SIGNING_SECRET_KEY,
    CreateRoomError,
    CreateRoomErrorKind,
    CreateRoomRequest,
    CreateRoomUseCase,
    ListRoomsUseCase,
    LoginError,
    LoginErrorKind,
    LoginWithEmailAndPasswordRequest,
    LoginWithEmailAndPasswordResult,
    LoginWithEmailAndPasswordUseCase,
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
