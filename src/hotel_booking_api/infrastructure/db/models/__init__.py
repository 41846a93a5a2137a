from hotel_booking_api.infrastructure.db.models.hotel_models import CustomerModel, RoomModel

__all__ = ["CustomerModel", "RoomModel"]
