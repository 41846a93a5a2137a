from hotel_booking_api.infrastructure.security.access_tokens import JoseAccessTokenCodec
from hotel_booking_api.infrastructure.security.password_hasher import BcryptPasswordHasher

__all__ = [
    "BcryptPasswordHasher",
    "JoseAccessTokenCodec",
]
