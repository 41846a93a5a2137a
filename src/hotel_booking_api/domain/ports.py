from collections.abc import Mapping
from typing import Any, Protocol

from hotel_booking_api.domain.entities import Customer, Room


class SecretsGateway(Protocol):
    async def get(self, key: str) -> str: ...


class CustomersGateway(Protocol):
    async def create(self, customer: Customer) -> None: ...

    async def find_one_by_email(self, email: str) -> Customer | None: ...

    async def exists_by_email(self, email: str) -> bool: ...


class RoomsRepository(Protocol):
    async def create(self, room: Room) -> None: ...

    async def exists_by_room_number(self, number: str) -> bool: ...

    async def find_all(self) -> list[Room]: ...


class PasswordHasher(Protocol):
    def hash(self, plain_password: str) -> str: ...

    def verify(self, plain_password: str, hashed_password: str) -> bool: ...


class AccessTokenCodec(Protocol):
    def encode(self, claims: Mapping[str, Any], secret: str) -> str: ...

    def decode(self, token: str, secret: str) -> dict[str, Any]: ...
