from collections.abc import Iterator
from datetime import UTC, datetime, timedelta
from pathlib import Path
from typing import Any
from uuid import uuid4

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

# Ensure model metadata is registered before creating tables.
from hotel_booking_api.infrastructure.db.models import CustomerModel, RoomModel  # noqa: F401
from hotel_booking_api.api.app import create_app
from hotel_booking_api.application import JWT_SIGNING_SECRET_KEY
from hotel_booking_api.domain.entities import Customer, Room
from hotel_booking_api.domain.exceptions import (
    DuplicateCustomerEmailError,
    DuplicateRoomNumberError,
    SecretNotFoundError,
)
from hotel_booking_api.infrastructure.security import BcryptPasswordHasher, JoseAccessTokenCodec
from hotel_booking_api.shared.config import ApplicationContainer, Settings

SIGNING_SECRET = "test-signing-secret"


class FakeSecretsGateway:
    def __init__(self, values: dict[str, str] | None = None) -> None:
        self.values = dict(values or {})
        self.calls = 0

    async def get(self, key: str) -> str:
        self.calls += 1
        if key not in self.values:
            raise SecretNotFoundError(f"secret {key} not found")
        return self.values[key]


class FakeCustomersGateway:
    def __init__(self) -> None:
        self.customers: list[Customer] = []

    async def create(self, customer: Customer) -> None:
        if any(existing.email == customer.email for existing in self.customers):
            raise DuplicateCustomerEmailError("email already registered")
        self.customers.append(customer)

    async def find_one_by_email(self, email: str) -> Customer | None:
        return next((c for c in self.customers if c.email == email), None)

    async def exists_by_email(self, email: str) -> bool:
        return any(c.email == email for c in self.customers)


class FakeRoomsRepository:
    def __init__(self) -> None:
        self.rooms: list[Room] = []

    async def create(self, room: Room) -> None:
        if any(existing.number == room.number for existing in self.rooms):
            raise DuplicateRoomNumberError(room.number)
        self.rooms.append(room)

    async def exists_by_room_number(self, number: str) -> bool:
        return any(room.number == number for room in self.rooms)

    async def find_all(self) -> list[Room]:
        return list(self.rooms)


class SpyAuditLogger:
    def __init__(self) -> None:
        self.events: list[tuple[str, dict[str, Any]]] = []

    def log_customer_signed_up(self, **kwargs: Any) -> None:
        self.events.append(("CUSTOMER_SIGNED_UP", kwargs))

    def log_customer_logged_in(self, **kwargs: Any) -> None:
        self.events.append(("CUSTOMER_LOGGED_IN", kwargs))

    def log_login_failed(self, **kwargs: Any) -> None:
        self.events.append(("LOGIN_FAILED", kwargs))

    def log_room_created(self, **kwargs: Any) -> None:
        self.events.append(("ROOM_CREATED", kwargs))


def issue_token(
    role: str,
    secret: str = SIGNING_SECRET,
    expires_in: timedelta = timedelta(days=30),
) -> str:
    issued_at = datetime.now(UTC)
    claims = {
        "customerId": str(uuid4()),
        "role": role,
        "iat": issued_at,
        "exp": issued_at + expires_in,
    }
    return JoseAccessTokenCodec().encode(claims, secret)


@pytest.fixture
def password_hasher() -> BcryptPasswordHasher:
    return BcryptPasswordHasher(rounds=4)


@pytest.fixture
def token_codec() -> JoseAccessTokenCodec:
    return JoseAccessTokenCodec()


@pytest.fixture
def secrets_gateway() -> FakeSecretsGateway:
    return FakeSecretsGateway({JWT_SIGNING_SECRET_KEY: SIGNING_SECRET})


@pytest.fixture
def customers_gateway() -> FakeCustomersGateway:
    return FakeCustomersGateway()


@pytest.fixture
def rooms_repository() -> FakeRoomsRepository:
    return FakeRoomsRepository()


@pytest.fixture
def audit_logger() -> SpyAuditLogger:
    return SpyAuditLogger()


@pytest.fixture
def container(
    secrets_gateway: FakeSecretsGateway,
    customers_gateway: FakeCustomersGateway,
    rooms_repository: FakeRoomsRepository,
    password_hasher: BcryptPasswordHasher,
    token_codec: JoseAccessTokenCodec,
) -> ApplicationContainer:
    return ApplicationContainer(
        app_settings=Settings(_env_file=None),
        secrets_gateway=secrets_gateway,
        customers_gateway=customers_gateway,
        rooms_repository=rooms_repository,
        password_hasher=password_hasher,
        token_codec=token_codec,
    )


@pytest.fixture
def client(container: ApplicationContainer) -> Iterator[TestClient]:
    with TestClient(create_app(container)) as test_client:
        yield test_client


@pytest.fixture
def admin_token() -> str:
    return issue_token("ADMIN")


@pytest.fixture
def customer_token() -> str:
    return issue_token("CUSTOMER")


@pytest.fixture
def sqlite_url(tmp_path: Path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'hotel_booking_test.db'}"


@pytest_asyncio.fixture(scope="function")
async def sqlite_session_factory(sqlite_url: str) -> async_sessionmaker[AsyncSession]:
    engine = create_async_engine(sqlite_url)
    try:
        async with engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)
        yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    finally:
        await engine.dispose()
