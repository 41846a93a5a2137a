from hotel_booking_api.infrastructure.db.models import CustomerModel, RoomModel

__all__ = ["CustomerModel", "RoomModel"]
