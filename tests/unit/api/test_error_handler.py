import logging

import pytest
from fastapi.testclient import TestClient

from hotel_booking_api.api.app import create_app
from hotel_booking_api.api.routers.rooms import get_list_rooms_use_case
from hotel_booking_api.shared.logging import AuditLogger


class ExplodingListRoomsUseCase:
    async def execute(self):
        raise RuntimeError("database unavailable")


@pytest.fixture
def failing_client(container):
    application = create_app(container)
    application.dependency_overrides[get_list_rooms_use_case] = ExplodingListRoomsUseCase
    with TestClient(application) as test_client:
        yield test_client


def test_unexpected_error_returns_generic_internal_error(failing_client, customer_token) -> None:
    response = failing_client.get("/api/rooms", headers={"Authorization": customer_token})

    assert response.status_code == 500
    assert response.json() == {
        "statusCode": 500,
        "statusText": "INTERNAL_SERVER_ERROR",
        "error": "something went wrong. Please try again later",
    }


def test_unexpected_error_is_logged_with_masked_headers(
    failing_client,
    customer_token,
    caplog,
) -> None:
    with caplog.at_level(logging.ERROR, logger="hotel_booking_api.api.middleware.error_handler"):
        failing_client.get("/api/rooms", headers={"Authorization": customer_token})

    assert len(caplog.records) == 1
    message = caplog.records[0].getMessage()
    assert "path=/api/rooms" in message
    assert "database unavailable" in message
    assert customer_token not in message
    assert "***MASKED***" in message


def test_unknown_route_uses_error_envelope(client: TestClient) -> None:
    response = client.get("/api/unknown")

    assert response.status_code == 404
    assert response.json() == {"statusCode": 404, "statusText": "NOT_FOUND", "error": "Not Found"}


def test_wrong_method_uses_error_envelope(client: TestClient) -> None:
    response = client.get("/api/create-room")

    assert response.status_code == 405
    assert response.json()["statusText"] == "METHOD_NOT_ALLOWED"


def test_mask_sensitive_data_masks_nested_values() -> None:
    masked = AuditLogger.mask_sensitive_data(
        {
            "email": "john.doe@gmail.com",
            "password": "123456",
            "headers": {"authorization": "token", "accept": "application/json"},
            "number": "101",
        }
    )

    assert masked == {
        "email": "j***@gmail.com",
        "password": "***MASKED***",
        "headers": {"authorization": "***MASKED***", "accept": "application/json"},
        "number": "101",
    }
