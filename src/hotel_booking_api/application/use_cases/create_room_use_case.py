from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Protocol

from hotel_booking_api.domain.entities import Room
from hotel_booking_api.domain.exceptions import (
    DuplicateRoomNumberError,
    InvalidRoomError,
    RoomRuleViolation,
)
from hotel_booking_api.domain.ports import RoomsRepository


class CreateRoomErrorKind(StrEnum):
    ROOM_NUMBER_IN_USE = (
        "the room number '{number}' is already in use. Please assign another room number"
    )
    INVALID_NUMBER = RoomRuleViolation.INVALID_NUMBER.value
    INVALID_TYPE = RoomRuleViolation.INVALID_TYPE.value
    INVALID_CAPACITY = RoomRuleViolation.INVALID_CAPACITY.value
    INVALID_PRICE = RoomRuleViolation.INVALID_PRICE.value


_RULE_VIOLATION_KINDS = {
    RoomRuleViolation.INVALID_NUMBER: CreateRoomErrorKind.INVALID_NUMBER,
    RoomRuleViolation.INVALID_TYPE: CreateRoomErrorKind.INVALID_TYPE,
    RoomRuleViolation.INVALID_CAPACITY: CreateRoomErrorKind.INVALID_CAPACITY,
    RoomRuleViolation.INVALID_PRICE: CreateRoomErrorKind.INVALID_PRICE,
}


class CreateRoomError(ValueError):
    """Raised when a room cannot be created because of a business rule."""

    def __init__(self, kind: CreateRoomErrorKind, **params: Any) -> None:
        super().__init__(kind.value.format(**params))
        self.kind = kind


class CreateRoomAuditLogger(Protocol):
    def log_room_created(self, *, room_id: str, number: str) -> None: ...


@dataclass(slots=True, frozen=True)
class CreateRoomRequest:
    number: str
    type: str
    capacity: int
    price: int


class CreateRoomUseCase:
    """Create a room with a unique number.

    Example:
        ```python
        await CreateRoomUseCase(rooms_repository).execute(
            CreateRoomRequest(number="101", type="SINGLE", capacity=2, price=150)
        )
        ```
    """

    def __init__(
        self,
        rooms_repository: RoomsRepository,
        audit_logger: CreateRoomAuditLogger | None = None,
    ) -> None:
        self._rooms_repository = rooms_repository
        self._audit_logger = audit_logger

    async def execute(self, request: CreateRoomRequest) -> Room:
        if await self._rooms_repository.exists_by_room_number(request.number):
            raise CreateRoomError(CreateRoomErrorKind.ROOM_NUMBER_IN_USE, number=request.number)

        try:
            room = Room(
                number=request.number,
                type=request.type,
                capacity=request.capacity,
                price=request.price,
            )
        except InvalidRoomError as exc:
            raise CreateRoomError(_RULE_VIOLATION_KINDS[exc.kind]) from exc

        try:
            await self._rooms_repository.create(room)
        except DuplicateRoomNumberError as exc:
            raise CreateRoomError(
                CreateRoomErrorKind.ROOM_NUMBER_IN_USE,
                number=request.number,
            ) from exc

        if self._audit_logger is not None:
            self._audit_logger.log_room_created(room_id=str(room.id), number=room.number)
        return room
