from http import HTTPStatus
from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from hotel_booking_api.api import responses
from hotel_booking_api.api.binding import bind_json_body
from hotel_booking_api.api.dependencies import (
    ContainerDependency,
    get_field_validator,
    get_token_authorizer,
)
from hotel_booking_api.api.schemas import (
    CREATE_ROOM_SCHEMA,
    ErrorResponseDTO,
    RoomResponseDTO,
    SuccessResponseDTO,
    ValidationErrorResponseDTO,
)
from hotel_booking_api.api.security import TokenAuthorizer
from hotel_booking_api.api.validation import FieldValidator
from hotel_booking_api.application import (
    CreateRoomError,
    CreateRoomRequest,
    CreateRoomUseCase,
    ListRoomsUseCase,
)

router = APIRouter(tags=["rooms"])

AUTHORIZATION_HEADER = "Authorization"


def get_create_room_use_case(container: ContainerDependency) -> CreateRoomUseCase:
    return container.create_create_room_use_case()


def get_list_rooms_use_case(container: ContainerDependency) -> ListRoomsUseCase:
    return container.create_list_rooms_use_case()


@router.post(
    "/create-room",
    status_code=HTTPStatus.CREATED,
    summary="Create room",
    description="Create a room. Requires an access token with the ADMIN role.",
    responses={
        201: {"model": SuccessResponseDTO, "description": "Room created"},
        400: {"model": ValidationErrorResponseDTO, "description": "Invalid request body"},
        401: {"model": ErrorResponseDTO, "description": "Missing authorization token"},
        403: {"model": ErrorResponseDTO, "description": "Token is not an admin token"},
        409: {"model": ErrorResponseDTO, "description": "Room number in use or invalid room"},
        500: {"model": ErrorResponseDTO, "description": "Internal server error"},
    },
)
async def create_room(
    request: Request,
    use_case: Annotated[CreateRoomUseCase, Depends(get_create_room_use_case)],
    validator: Annotated[FieldValidator, Depends(get_field_validator)],
    authorizer: Annotated[TokenAuthorizer, Depends(get_token_authorizer)],
) -> JSONResponse:
    token = request.headers.get(AUTHORIZATION_HEADER, "")
    if not token:
        return responses.unauthorized()
    if not await authorizer.is_admin(token):
        return responses.forbidden()

    payload = await bind_json_body(request)
    if payload is None:
        return responses.bad_request_validation([responses.CONTENT_TYPE_ERROR_MESSAGE])

    errors = validator.validate(payload, CREATE_ROOM_SCHEMA)
    if errors:
        return responses.bad_request_validation(errors)

    try:
        await use_case.execute(
            CreateRoomRequest(
                number=payload["number"],
                type=payload["type"],
                capacity=int(payload["capacity"]),
                price=int(payload["price"]),
            )
        )
    except CreateRoomError as exc:
        return responses.conflict(str(exc))

    return responses.created(None)


@router.get(
    "/rooms",
    summary="List rooms",
    description="List every room in creation order. Requires a CUSTOMER or ADMIN token.",
    responses={
        200: {"model": SuccessResponseDTO, "description": "Rooms listed"},
        401: {"model": ErrorResponseDTO, "description": "Missing authorization token"},
        403: {"model": ErrorResponseDTO, "description": "Token has no customer access"},
        500: {"model": ErrorResponseDTO, "description": "Internal server error"},
    },
)
async def list_rooms(
    request: Request,
    use_case: Annotated[ListRoomsUseCase, Depends(get_list_rooms_use_case)],
    authorizer: Annotated[TokenAuthorizer, Depends(get_token_authorizer)],
) -> JSONResponse:
    token = request.headers.get(AUTHORIZATION_HEADER, "")
    if not token:
        return responses.unauthorized()
    if not await authorizer.is_customer(token):
        return responses.forbidden()

    rooms = await use_case.execute()
    return responses.ok(
        [RoomResponseDTO.model_validate(room).model_dump(mode="json") for room in rooms]
    )
