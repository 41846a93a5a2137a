from typing import TYPE_CHECKING
from urllib.parse import quote_plus

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from hotel_booking_api.infrastructure.db.models import CustomerModel, RoomModel  # noqa: F401

if TYPE_CHECKING:
    from hotel_booking_api.shared.config.settings import Settings


def build_database_url(app_settings: "Settings") -> str:
    """Build async SQLAlchemy URL from explicit URL or Postgres settings."""
    if app_settings.database_url:
        return app_settings.database_url

    password = quote_plus(app_settings.postgres_password)
    return (
        "postgresql+asyncpg://"
        f"{app_settings.postgres_user}:{password}@"
        f"{app_settings.postgres_host}:{app_settings.postgres_port}/"
        f"{app_settings.postgres_database}"
    )


def to_async_database_url(database_url: str) -> str:
    """Point plain `postgres://` or `postgresql://` URLs at the asyncpg driver."""
    url = make_url(database_url)
    if url.drivername in ("postgres", "postgresql"):
        url = url.set(drivername="postgresql+asyncpg")
    return url.render_as_string(hide_password=False)


def create_session_factory(
    app_settings: "Settings",
    database_url: str | None = None,
) -> async_sessionmaker[AsyncSession]:
    """Create async SQLModel session factory for the configured database.

    `database_url` overrides the settings, e.g. a URL read from the secrets store.
    """
    database_url = to_async_database_url(database_url or build_database_url(app_settings))
    engine_options: dict[str, object] = {"echo": app_settings.db_echo, "pool_pre_ping": True}
    if make_url(database_url).get_backend_name() != "sqlite":
        engine_options["pool_size"] = app_settings.db_pool_size
        engine_options["max_overflow"] = app_settings.db_max_overflow
    engine = create_async_engine(database_url, **engine_options)
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def create_schema(engine: AsyncEngine) -> None:
    """Create missing tables for all registered SQLModel models."""
    async with engine.begin() as connection:
        await connection.run_sync(SQLModel.metadata.create_all)
