from collections.abc import Mapping
from typing import Any

from jose import jwt
from jose.exceptions import JOSEError

from hotel_booking_api.domain.exceptions import InvalidAccessTokenError


class JoseAccessTokenCodec:
    """Sign and verify HMAC JWTs with python-jose.

    `datetime` values for `iat`/`exp` are converted to epoch seconds on
    encode; `exp` is enforced on decode when present.
    """

    def __init__(self, algorithm: str = "HS256") -> None:
        self._algorithm = algorithm

    def encode(self, claims: Mapping[str, Any], secret: str) -> str:
        return jwt.encode(dict(claims), secret, algorithm=self._algorithm)

    def decode(self, token: str, secret: str) -> dict[str, Any]:
        if not token or not secret:
            raise InvalidAccessTokenError("token and secret are required")
        try:
            return jwt.decode(token, secret, algorithms=[self._algorithm])
        except JOSEError as exc:
            raise InvalidAccessTokenError(str(exc)) from exc
