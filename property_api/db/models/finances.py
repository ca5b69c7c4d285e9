from __future__ import annotations

import uuid
import datetime as dt
from typing import Optional

from sqlalchemy import Date, ForeignKey, Numeric, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from property_api.db.base import Base, TimestampMixin, UUIDPkMixin
from property_api.db.models.rooms import Room
from property_api.db.models.tenants import Tenant


class Transaction(UUIDPkMixin, TimestampMixin, Base):
    """Income or expense entry in the building ledger."""
    __tablename__ = "transactions"

    type: Mapped[str] = mapped_column(Text, nullable=False, index=True)
    amount: Mapped[float] = mapped_column(Numeric(14, 2, asdecimal=False), nullable=False)
    category: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False, index=True)
    room_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("rooms.id", ondelete="SET NULL"), nullable=True
    )
    tenant_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("tenants.id", ondelete="SET NULL"), nullable=True
    )

    room: Mapped[Optional[Room]] = relationship("Room", lazy="selectin")
    tenant: Mapped[Optional[Tenant]] = relationship("Tenant", lazy="selectin")
