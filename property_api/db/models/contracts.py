from __future__ import annotations

import uuid
from datetime import date
from typing import List, Optional

from sqlalchemy import Date, ForeignKey, Numeric, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from property_api.core.enums import ContractStatus
from property_api.db.base import Base, JSONType, TimestampMixin, UUIDPkMixin
from property_api.db.models.rooms import Room
from property_api.db.models.tenants import Tenant


class Contract(UUIDPkMixin, TimestampMixin, Base):
    """Rental agreement binding a tenant to a room for a date range."""
    __tablename__ = "contracts"

    tenant_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("tenants.id"), nullable=False, index=True
    )
    room_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("rooms.id"), nullable=False, index=True
    )
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    deposit: Mapped[float] = mapped_column(Numeric(14, 2, asdecimal=False), nullable=False)
    monthly_rent: Mapped[float] = mapped_column(Numeric(14, 2, asdecimal=False), nullable=False)
    terms: Mapped[List[str]] = mapped_column(JSONType, nullable=False, default=list)
    status: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default=ContractStatus.active.value,
        server_default=ContractStatus.active.value,
        index=True,
    )
    termination_reason: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    termination_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)

    tenant: Mapped[Tenant] = relationship("Tenant", lazy="selectin")
    room: Mapped[Room] = relationship("Room", lazy="selectin")
