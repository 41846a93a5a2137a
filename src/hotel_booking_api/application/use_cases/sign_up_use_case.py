import asyncio
import re
from dataclasses import dataclass
from enum import StrEnum
from typing import Protocol
from uuid import UUID

from hotel_booking_api.domain.entities import Customer
from hotel_booking_api.domain.exceptions import DuplicateCustomerEmailError
from hotel_booking_api.domain.ports import CustomersGateway, PasswordHasher

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")
MIN_NAME_LENGTH = 3
MIN_PASSWORD_LENGTH = 6


class SignUpErrorKind(StrEnum):
    NAME_TOO_SHORT = "name must be at least 3 characters long"
    EMAIL_INVALID = "email is invalid"
    PASSWORD_TOO_SHORT = "password must be at least 6 characters long"
    EMAIL_ALREADY_IN_USE = "email address is already associated with another account"


class SignUpError(ValueError):
    """Raised when a sign-up request breaks a business rule."""

    def __init__(self, kind: SignUpErrorKind) -> None:
        super().__init__(kind.value)
        self.kind = kind


class SignUpAuditLogger(Protocol):
    def log_customer_signed_up(self, *, customer_id: str, email: str) -> None: ...


@dataclass(slots=True, frozen=True)
class SignUpRequest:
    name: str
    email: str
    password: str


class SignUpUseCase:
    """Register a new customer with a bcrypt-hashed password.

    Example:
        ```python
        await SignUpUseCase(customers_gateway, password_hasher).execute(
            SignUpRequest(name="John Doe", email="john.doe@gmail.com", password="123456")
        )
        ```
    """

    def __init__(
        self,
        customers_gateway: CustomersGateway,
        password_hasher: PasswordHasher,
        audit_logger: SignUpAuditLogger | None = None,
    ) -> None:
        self._customers_gateway = customers_gateway
        self._password_hasher = password_hasher
        self._audit_logger = audit_logger

    async def execute(self, request: SignUpRequest) -> UUID:
        """Validate, check email uniqueness and persist the customer."""
        self._validate(request)

        if await self._customers_gateway.exists_by_email(request.email):
            raise SignUpError(SignUpErrorKind.EMAIL_ALREADY_IN_USE)

        hashed_password = await asyncio.to_thread(self._password_hasher.hash, request.password)
        customer = Customer(
            name=request.name,
            email=request.email,
            hashed_password=hashed_password,
        )
        try:
            await self._customers_gateway.create(customer)
        except DuplicateCustomerEmailError as exc:
            raise SignUpError(SignUpErrorKind.EMAIL_ALREADY_IN_USE) from exc

        if self._audit_logger is not None:
            self._audit_logger.log_customer_signed_up(
                customer_id=str(customer.id),
                email=customer.email,
            )
        return customer.id

    @staticmethod
    def _validate(request: SignUpRequest) -> None:
        if len(request.name) < MIN_NAME_LENGTH:
            raise SignUpError(SignUpErrorKind.NAME_TOO_SHORT)
        if not EMAIL_PATTERN.fullmatch(request.email):
            raise SignUpError(SignUpErrorKind.EMAIL_INVALID)
        if len(request.password) < MIN_PASSWORD_LENGTH:
            raise SignUpError(SignUpErrorKind.PASSWORD_TOO_SHORT)
