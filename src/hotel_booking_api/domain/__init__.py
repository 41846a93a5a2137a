from hotel_booking_api.domain.entities import Customer, Room
from hotel_booking_api.domain.enums import Role, RoomType
from hotel_booking_api.domain.exceptions import (
    DuplicateCustomerEmailError,
    DuplicateRoomNumberError,
    InvalidAccessTokenError,
    InvalidRoomError,
    RoomRuleViolation,
    SecretNotFoundError,
    SecretsUnavailableError,
)
from hotel_booking_api.domain.ports import (
    AccessTokenCodec,
    CustomersGateway,
    PasswordHasher,
    RoomsRepository,
    SecretsGateway,
)

__all__ = [
    "AccessTokenCodec",
    "Customer",
    "CustomersGateway",
    "DuplicateCustomerEmailError",
    "DuplicateRoomNumberError",
    "InvalidAccessTokenError",
    "InvalidRoomError",
    "PasswordHasher",
    "Role",
    "Room",
    "RoomRuleViolation",
    "RoomType",
    "RoomsRepository",
    "SecretNotFoundError",
    "SecretsGateway",
    "SecretsUnavailableError",
]
