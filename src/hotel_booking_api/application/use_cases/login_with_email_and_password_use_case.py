import asyncio
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from enum import StrEnum
from typing import NoReturn, Protocol
from uuid import UUID

from hotel_booking_api.domain.enums import Role
from hotel_booking_api.domain.ports import (
    AccessTokenCodec,
    CustomersGateway,
    PasswordHasher,
    SecretsGateway,
)

JWT_SIGNING_SECRET_KEY = "JWT_SIGNING_ACCESS_TOKEN"
ACCESS_TOKEN_TTL = timedelta(days=30)


class LoginErrorKind(StrEnum):
    INVALID_CREDENTIALS = "email or password is incorrect"


class LoginError(ValueError):
    """Raised when the credentials do not match a customer."""

    def __init__(self, kind: LoginErrorKind) -> None:
        super().__init__(kind.value)
        self.kind = kind


class LoginAuditLogger(Protocol):
    def log_customer_logged_in(self, *, customer_id: str) -> None: ...

    def log_login_failed(self, *, email: str) -> None: ...


@dataclass(slots=True, frozen=True)
class LoginWithEmailAndPasswordRequest:
    email: str
    plain_password: str


@dataclass(slots=True, frozen=True)
class LoginWithEmailAndPasswordResult:
    customer_id: UUID
    customer_name: str
    access_token: str


class LoginWithEmailAndPasswordUseCase:
    """Check credentials and issue a signed access token.

    Unknown emails and wrong passwords fail with the same error so callers
    cannot tell which accounts exist.
    """

    def __init__(
        self,
        customers_gateway: CustomersGateway,
        secrets_gateway: SecretsGateway,
        password_hasher: PasswordHasher,
        token_codec: AccessTokenCodec,
        audit_logger: LoginAuditLogger | None = None,
        clock: Callable[[], datetime] | None = None,
        token_ttl: timedelta = ACCESS_TOKEN_TTL,
    ) -> None:
        self._customers_gateway = customers_gateway
        self._secrets_gateway = secrets_gateway
        self._password_hasher = password_hasher
        self._token_codec = token_codec
        self._audit_logger = audit_logger
        self._clock = clock or (lambda: datetime.now(UTC))
        self._token_ttl = token_ttl

    async def execute(
        self,
        request: LoginWithEmailAndPasswordRequest,
    ) -> LoginWithEmailAndPasswordResult:
        customer = await self._customers_gateway.find_one_by_email(request.email)
        if customer is None:
            self._reject(request.email)

        password_matches = await asyncio.to_thread(
            self._password_hasher.verify,
            request.plain_password,
            customer.hashed_password,
        )
        if not password_matches:
            self._reject(request.email)

        issued_at = self._clock()
        claims = {
            "customerId": str(customer.id),
            "role": Role.CUSTOMER.value,
            "iat": issued_at,
            "exp": issued_at + self._token_ttl,
        }
        secret = await self._secrets_gateway.get(JWT_SIGNING_SECRET_KEY)
        access_token = self._token_codec.encode(claims, secret)

        if self._audit_logger is not None:
            self._audit_logger.log_customer_logged_in(customer_id=str(customer.id))
        return LoginWithEmailAndPasswordResult(
            customer_id=customer.id,
            customer_name=customer.name,
            access_token=access_token,
        )

    def _reject(self, email: str) -> NoReturn:
        if self._audit_logger is not None:
            self._audit_logger.log_login_failed(email=email)
        raise LoginError(LoginErrorKind.INVALID_CREDENTIALS)
