from __future__ import annotations

import uuid
from typing import List, Optional

from sqlalchemy import ForeignKey, Integer, Numeric, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from property_api.core.enums import RoomStatus
from property_api.db.base import Base, JSONType, TimestampMixin, UUIDPkMixin


class RoomType(UUIDPkMixin, TimestampMixin, Base):
    """Category of room (studio, single, duplex, ...) managed from settings."""
    __tablename__ = "room_types"

    name: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)


class Room(UUIDPkMixin, TimestampMixin, Base):
    """Rentable room in the building."""
    __tablename__ = "rooms"

    name: Mapped[str] = mapped_column(Text, nullable=False)
    room_type_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("room_types.id"), nullable=False, index=True
    )
    floor: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    area: Mapped[Optional[float]] = mapped_column(Numeric(10, 2, asdecimal=False), nullable=True)
    price: Mapped[float] = mapped_column(Numeric(14, 2, asdecimal=False), nullable=False)
    status: Mapped[str] = mapped_column(
        Text, nullable=False, default=RoomStatus.vacant.value, server_default=RoomStatus.vacant.value
    )
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    amenities: Mapped[List[str]] = mapped_column(JSONType, nullable=False, default=list)
    images: Mapped[List[str]] = mapped_column(JSONType, nullable=False, default=list)
    videos: Mapped[List[str]] = mapped_column(JSONType, nullable=False, default=list)

    room_type: Mapped[RoomType] = relationship("RoomType", lazy="selectin")
