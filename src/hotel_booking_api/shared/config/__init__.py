from hotel_booking_api.shared.config.container import ApplicationContainer
from hotel_booking_api.shared.config.settings import Settings, settings

__all__ = ["ApplicationContainer", "Settings", "settings"]
