from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from hotel_booking_api.api.middleware import ErrorHandlerMiddleware, http_exception_handler
from hotel_booking_api.api.routers.auth import router as auth_router
from hotel_booking_api.api.routers.health import router as health_router
from hotel_booking_api.api.routers.rooms import router as rooms_router
from hotel_booking_api.shared.config import ApplicationContainer, settings


def create_app(container: ApplicationContainer | None = None) -> FastAPI:
    """Build and configure the FastAPI application instance."""
    container = container or ApplicationContainer(settings)
    app_settings = container.settings

    @asynccontextmanager
    async def app_lifespan(app: FastAPI):
        """Initialize and release shared app resources."""
        await container.startup()
        try:
            yield
        finally:
            await container.shutdown()

    app = FastAPI(
        title=app_settings.app_name,
        debug=app_settings.app_debug,
        version=app_settings.app_version,
        lifespan=app_lifespan,
    )
    app.state.container = container
    if app_settings.cors_allowed_origins_list:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=app_settings.cors_allowed_origins_list,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
    app.add_middleware(ErrorHandlerMiddleware)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.include_router(health_router, prefix="/api")
    app.include_router(auth_router, prefix="/api")
    app.include_router(rooms_router, prefix="/api")
    return app
