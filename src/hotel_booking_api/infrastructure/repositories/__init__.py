from hotel_booking_api.infrastructure.repositories.sql_rooms_repository import SQLRoomsRepository

__all__ = ["SQLRoomsRepository"]
