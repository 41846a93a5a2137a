from uuid import UUID

from pydantic import BaseModel, ConfigDict

from hotel_booking_api.domain.enums import RoomType


class RoomResponseDTO(BaseModel):
    """Room item returned by `GET /api/rooms`."""

    id: UUID
    type: RoomType
    number: str
    capacity: int
    price: int

    model_config = ConfigDict(from_attributes=True)
