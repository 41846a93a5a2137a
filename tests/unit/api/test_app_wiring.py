from fastapi.middleware.cors import CORSMiddleware
from fastapi.testclient import TestClient

from hotel_booking_api.api.app import create_app
from hotel_booking_api.api.middleware import ErrorHandlerMiddleware
from hotel_booking_api.shared.config import ApplicationContainer, Settings


def test_create_app_registers_api_routes(container: ApplicationContainer) -> None:
    application = create_app(container)
    route_paths = set(application.openapi()["paths"])

    assert {
        "/api/health",
        "/api/sign-up",
        "/api/login-with-email-and-password",
        "/api/create-room",
        "/api/rooms",
    } <= route_paths
    assert application.state.container is container


def test_create_app_installs_error_handler_middleware(container: ApplicationContainer) -> None:
    application = create_app(container)
    middleware_types = {middleware.cls for middleware in application.user_middleware}

    assert ErrorHandlerMiddleware in middleware_types
    assert CORSMiddleware not in middleware_types


def test_create_app_enables_cors_middleware_when_origins_are_configured(
    secrets_gateway,
    customers_gateway,
    rooms_repository,
) -> None:
    container = ApplicationContainer(
        app_settings=Settings(
            _env_file=None,
            CORS_ALLOWED_ORIGINS="http://localhost:3000,http://localhost:5173",
        ),
        secrets_gateway=secrets_gateway,
        customers_gateway=customers_gateway,
        rooms_repository=rooms_repository,
    )

    application = create_app(container)
    middleware_types = {middleware.cls for middleware in application.user_middleware}

    assert CORSMiddleware in middleware_types


def test_health_check_returns_ok(client: TestClient) -> None:
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_container_does_not_touch_database_when_stores_are_injected(
    container: ApplicationContainer,
) -> None:
    assert container.uses_database is False
    assert container.create_rooms_repository() is container.create_rooms_repository()
