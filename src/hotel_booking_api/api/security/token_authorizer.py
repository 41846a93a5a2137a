import logging
from typing import Any

from hotel_booking_api.application import JWT_SIGNING_SECRET_KEY
from hotel_booking_api.domain.enums import Role
from hotel_booking_api.domain.exceptions import (
    InvalidAccessTokenError,
    SecretNotFoundError,
    SecretsUnavailableError,
)
from hotel_booking_api.domain.ports import AccessTokenCodec, SecretsGateway

logger = logging.getLogger(__name__)

CUSTOMER_ROLES = frozenset({Role.ADMIN.value, Role.CUSTOMER.value})


class TokenAuthorizer:
    """Answer role questions about a raw bearer token.

    The signing secret is read from the secrets gateway on every call. Any
    failure (missing secret, malformed token, bad signature, expired token)
    is reported as `False`.

    Example:
        ```python
        authorizer = TokenAuthorizer(secrets_gateway, token_codec)
        if not await authorizer.is_admin(request.headers["Authorization"]):
            ...
        ```
    """

    def __init__(self, secrets_gateway: SecretsGateway, token_codec: AccessTokenCodec) -> None:
        self._secrets_gateway = secrets_gateway
        self._token_codec = token_codec

    async def is_admin(self, token: str) -> bool:
        return await self._role(token) == Role.ADMIN.value

    async def is_customer(self, token: str) -> bool:
        return await self._role(token) in CUSTOMER_ROLES

    async def _role(self, token: str) -> str | None:
        claims = await self._verified_claims(token)
        if claims is None:
            return None
        role = claims.get("role")
        # Signed claims can still carry any JSON type.
        return role if isinstance(role, str) else None

    async def _verified_claims(self, token: str) -> dict[str, Any] | None:
        try:
            secret = await self._secrets_gateway.get(JWT_SIGNING_SECRET_KEY)
        except (SecretNotFoundError, SecretsUnavailableError) as exc:
            logger.warning("token_authorization_secret_unavailable detail=%s", exc)
            return None
        try:
            return self._token_codec.decode(token, secret)
        except InvalidAccessTokenError:
            return None
