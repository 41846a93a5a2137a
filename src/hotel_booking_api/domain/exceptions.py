from enum import StrEnum


class RoomRuleViolation(StrEnum):
    """Business rules checked when a room is built, in evaluation order."""

    INVALID_NUMBER = (
        "invalid room number format. Please enter a three-digit room number (e.g. 101) "
        "where the first digit indicates the floor number, and the last two digits "
        "represent the room number on that floor"
    )
    INVALID_TYPE = "room type must be SINGLE, DOUBLE, TWIN or SUITE"
    INVALID_CAPACITY = (
        "invalid room capacity. Please enter a capacity of at least one to accommodate guests"
    )
    INVALID_PRICE = (
        "invalid room price. Please enter a value greater than zero to ensure proper pricing"
    )


class InvalidRoomError(ValueError):
    """Raised when room attributes break a business rule."""

    def __init__(self, kind: RoomRuleViolation) -> None:
        super().__init__(kind.value)
        self.kind = kind


class DuplicateRoomNumberError(ValueError):
    """Raised by room stores when the unique room number constraint is hit."""

    def __init__(self, number: str) -> None:
        super().__init__(f"room number {number!r} already exists")
        self.number = number


class DuplicateCustomerEmailError(ValueError):
    """Raised by customer stores when the unique email constraint is hit."""

    pass


class SecretNotFoundError(LookupError):
    """Raised when a secrets provider has no value for the requested key."""

    pass


class SecretsUnavailableError(RuntimeError):
    """Raised when a secrets provider cannot be read at all."""

    pass


class InvalidAccessTokenError(ValueError):
    """Raised when a token is malformed, badly signed or expired."""

    pass
