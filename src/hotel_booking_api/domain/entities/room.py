from dataclasses import dataclass, field
from uuid import UUID, uuid4

from hotel_booking_api.domain.enums import RoomType
from hotel_booking_api.domain.exceptions import InvalidRoomError, RoomRuleViolation


@dataclass(slots=True, frozen=True)
class Room:
    """Bookable hotel room.

    Attributes are checked on construction in a fixed order (number, type,
    capacity, price) and the first broken rule is raised as
    `InvalidRoomError`.

    Example:
        ```python
        room = Room(number="101", type="SINGLE", capacity=2, price=150)
        assert room.type is RoomType.SINGLE
        ```
    """

    number: str
    type: RoomType
    capacity: int
    price: int
    id: UUID = field(default_factory=uuid4)

    def __post_init__(self) -> None:
        if not self._is_number_valid(self.number):
            raise InvalidRoomError(RoomRuleViolation.INVALID_NUMBER)
        try:
            room_type = RoomType(self.type)
        except ValueError:
            raise InvalidRoomError(RoomRuleViolation.INVALID_TYPE) from None
        object.__setattr__(self, "type", room_type)
        if self.capacity <= 0:
            raise InvalidRoomError(RoomRuleViolation.INVALID_CAPACITY)
        if self.price <= 0:
            raise InvalidRoomError(RoomRuleViolation.INVALID_PRICE)

    @staticmethod
    def _is_number_valid(number: str) -> bool:
        # Only the length and the leading floor digit are enforced.
        return len(number) == 3 and number[0] == "1"
