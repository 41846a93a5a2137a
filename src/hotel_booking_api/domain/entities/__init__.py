from hotel_booking_api.domain.entities.customer import Customer
from hotel_booking_api.domain.entities.room import Room

__all__ = ["Customer", "Room"]
