from datetime import UTC, datetime
from uuid import UUID, uuid4

from sqlalchemy import BigInteger, DateTime, Integer, String, Uuid, func
from sqlalchemy import Enum as SAEnum
from sqlmodel import Column, Field, SQLModel

from hotel_booking_api.domain.enums import RoomType


class CustomerModel(SQLModel, table=True):
    __tablename__ = "customers"

    id: UUID = Field(default_factory=uuid4, sa_column=Column(Uuid, primary_key=True))
    name: str = Field(sa_column=Column(String(255), nullable=False))
    email: str = Field(sa_column=Column(String(255), nullable=False, unique=True, index=True))
    password: str = Field(sa_column=Column(String(255), nullable=False))
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(
            DateTime(timezone=True),
            nullable=False,
            server_default=func.now(),
        ),
    )


class RoomModel(SQLModel, table=True):
    __tablename__ = "rooms"

    # Insertion counter; listing order follows it.
    sequence: int | None = Field(
        default=None,
        sa_column=Column(
            BigInteger().with_variant(Integer, "sqlite"),
            primary_key=True,
            autoincrement=True,
        ),
    )
    id: UUID = Field(
        default_factory=uuid4,
        sa_column=Column(Uuid, nullable=False, unique=True, index=True),
    )
    number: str = Field(sa_column=Column(String(255), nullable=False, unique=True, index=True))
    type: RoomType = Field(
        sa_column=Column(
            SAEnum(RoomType, name="room_type", native_enum=False),
            nullable=False,
        )
    )
    capacity: int = Field(sa_column=Column(Integer, nullable=False))
    price: int = Field(sa_column=Column(BigInteger, nullable=False))
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(
            DateTime(timezone=True),
            nullable=False,
            server_default=func.now(),
            index=True,
        ),
    )
