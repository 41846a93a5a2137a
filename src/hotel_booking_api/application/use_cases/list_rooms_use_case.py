from hotel_booking_api.domain.entities import Room
from hotel_booking_api.domain.ports import RoomsRepository


class ListRoomsUseCase:
    """Return every room in insertion order."""

    def __init__(self, rooms_repository: RoomsRepository) -> None:
        self._rooms_repository = rooms_repository

    async def execute(self) -> list[Room]:
        return await self._rooms_repository.find_all()
