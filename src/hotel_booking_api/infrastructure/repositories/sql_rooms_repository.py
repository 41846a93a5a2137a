from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import async_sessionmaker
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from hotel_booking_api.domain.entities import Room
from hotel_booking_api.domain.exceptions import DuplicateRoomNumberError
from hotel_booking_api.infrastructure.db.models import RoomModel


class SQLRoomsRepository:
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def create(self, room: Room) -> None:
        try:
            async with self._session_factory() as session:
                async with session.begin():
                    session.add(self._to_model(room))
        except IntegrityError as exc:
            raise DuplicateRoomNumberError(room.number) from exc

    async def exists_by_room_number(self, number: str) -> bool:
        async with self._session_factory() as session:
            result = await session.exec(
                select(func.count(RoomModel.sequence)).where(RoomModel.number == number)
            )
            return int(result.one()) > 0

    async def find_all(self) -> list[Room]:
        async with self._session_factory() as session:
            result = await session.exec(
                select(RoomModel).order_by(RoomModel.sequence)
            )
            return [self._to_domain(model) for model in result.all()]

    @staticmethod
    def _to_model(room: Room) -> RoomModel:
        return RoomModel(
            id=room.id,
            number=room.number,
            type=room.type,
            capacity=room.capacity,
            price=room.price,
        )

    @staticmethod
    def _to_domain(model: RoomModel) -> Room:
        return Room(
            id=model.id,
            number=model.number,
            type=model.type,
            capacity=model.capacity,
            price=model.price,
        )
