from hotel_booking_api.api.middleware.error_handler import (
    ErrorHandlerMiddleware,
    http_exception_handler,
)

__all__ = [
    "ErrorHandlerMiddleware",
    "http_exception_handler",
]
