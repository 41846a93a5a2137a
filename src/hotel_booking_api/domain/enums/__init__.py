from hotel_booking_api.domain.enums.role import Role
from hotel_booking_api.domain.enums.room_type import RoomType

__all__ = ["Role", "RoomType"]
