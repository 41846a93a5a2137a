import pytest

from hotel_booking_api.application import (
    CreateRoomError,
    CreateRoomErrorKind,
    CreateRoomRequest,
    CreateRoomUseCase,
    ListRoomsUseCase,
)
from hotel_booking_api.domain.entities import Room
from hotel_booking_api.domain.enums import RoomType


def _request(**overrides) -> CreateRoomRequest:
    values = {"number": "101", "type": "SINGLE", "capacity": 2, "price": 150}
    values.update(overrides)
    return CreateRoomRequest(**values)


@pytest.mark.asyncio
async def test_create_room_persists_room(rooms_repository, audit_logger) -> None:
    use_case = CreateRoomUseCase(rooms_repository, audit_logger)

    room = await use_case.execute(_request())

    assert rooms_repository.rooms == [room]
    assert room.type is RoomType.SINGLE
    assert audit_logger.events == [("ROOM_CREATED", {"room_id": str(room.id), "number": "101"})]


@pytest.mark.asyncio
async def test_create_room_rejects_number_already_in_use(rooms_repository) -> None:
    rooms_repository.rooms.append(Room(number="101", type="DOUBLE", capacity=2, price=200))
    use_case = CreateRoomUseCase(rooms_repository)

    with pytest.raises(CreateRoomError) as exc_info:
        await use_case.execute(_request())

    assert exc_info.value.kind is CreateRoomErrorKind.ROOM_NUMBER_IN_USE
    assert str(exc_info.value) == (
        "the room number '101' is already in use. Please assign another room number"
    )
    assert len(rooms_repository.rooms) == 1


@pytest.mark.asyncio
async def test_create_room_checks_number_in_use_before_room_rules(rooms_repository) -> None:
    rooms_repository.rooms.append(Room(number="101", type="DOUBLE", capacity=2, price=200))
    use_case = CreateRoomUseCase(rooms_repository)

    with pytest.raises(CreateRoomError) as exc_info:
        await use_case.execute(_request(type="KING", capacity=0))

    assert exc_info.value.kind is CreateRoomErrorKind.ROOM_NUMBER_IN_USE


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("overrides", "expected_kind"),
    [
        ({"number": "1001"}, CreateRoomErrorKind.INVALID_NUMBER),
        ({"type": "KING"}, CreateRoomErrorKind.INVALID_TYPE),
        ({"capacity": 0}, CreateRoomErrorKind.INVALID_CAPACITY),
        ({"price": 0}, CreateRoomErrorKind.INVALID_PRICE),
    ],
)
async def test_create_room_surfaces_room_rule_violations(
    rooms_repository,
    overrides,
    expected_kind: CreateRoomErrorKind,
) -> None:
    use_case = CreateRoomUseCase(rooms_repository)

    with pytest.raises(CreateRoomError) as exc_info:
        await use_case.execute(_request(**overrides))

    assert exc_info.value.kind is expected_kind
    assert str(exc_info.value) == expected_kind.value
    assert rooms_repository.rooms == []


@pytest.mark.asyncio
async def test_create_room_maps_store_uniqueness_conflict(rooms_repository) -> None:
    class RacingRoomsRepository(type(rooms_repository)):
        async def exists_by_room_number(self, number: str) -> bool:
            return False

    racing_repository = RacingRoomsRepository()
    use_case = CreateRoomUseCase(racing_repository)
    await use_case.execute(_request())

    with pytest.raises(CreateRoomError) as exc_info:
        await use_case.execute(_request())

    assert exc_info.value.kind is CreateRoomErrorKind.ROOM_NUMBER_IN_USE


@pytest.mark.asyncio
async def test_list_rooms_returns_rooms_in_insertion_order(rooms_repository) -> None:
    create_room = CreateRoomUseCase(rooms_repository)
    first = await create_room.execute(_request(number="101"))
    second = await create_room.execute(_request(number="102", type="SUITE"))

    rooms = await ListRoomsUseCase(rooms_repository).execute()

    assert [room.id for room in rooms] == [first.id, second.id]


@pytest.mark.asyncio
async def test_list_rooms_returns_empty_list_without_rooms(rooms_repository) -> None:
    assert await ListRoomsUseCase(rooms_repository).execute() == []
