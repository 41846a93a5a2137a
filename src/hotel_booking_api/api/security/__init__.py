from hotel_booking_api.api.security.token_authorizer import TokenAuthorizer

__all__ = ["TokenAuthorizer"]
