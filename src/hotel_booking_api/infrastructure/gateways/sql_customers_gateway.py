from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import async_sessionmaker
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from hotel_booking_api.domain.entities import Customer
from hotel_booking_api.domain.exceptions import DuplicateCustomerEmailError
from hotel_booking_api.infrastructure.db.models import CustomerModel


class SQLCustomersGateway:
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def create(self, customer: Customer) -> None:
        try:
            async with self._session_factory() as session:
                async with session.begin():
                    session.add(
                        CustomerModel(
                            id=customer.id,
                            name=customer.name,
                            email=customer.email,
                            password=customer.hashed_password,
                        )
                    )
        except IntegrityError as exc:
            raise DuplicateCustomerEmailError("email already registered") from exc

    async def find_one_by_email(self, email: str) -> Customer | None:
        async with self._session_factory() as session:
            result = await session.exec(select(CustomerModel).where(CustomerModel.email == email))
            model = result.one_or_none()
            if model is None:
                return None
            return Customer(
                id=model.id,
                name=model.name,
                email=model.email,
                hashed_password=model.password,
            )

    async def exists_by_email(self, email: str) -> bool:
        async with self._session_factory() as session:
            result = await session.exec(
                select(func.count(CustomerModel.id)).where(CustomerModel.email == email)
            )
            return int(result.one()) > 0
