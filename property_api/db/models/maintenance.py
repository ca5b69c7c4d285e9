from __future__ import annotations

from datetime import date
from typing import Optional

from sqlalchemy import Date, Text
from sqlalchemy.orm import Mapped, mapped_column

from property_api.core.enums import MaintenanceStatus
from property_api.db.base import Base, TimestampMixin, UUIDPkMixin


class Maintenance(UUIDPkMixin, TimestampMixin, Base):
    """Maintenance ticket for a piece of building equipment."""
    __tablename__ = "maintenance"

    equipment_id: Mapped[str] = mapped_column(Text, nullable=False)
    equipment_name: Mapped[str] = mapped_column(Text, nullable=False)
    maintenance_type: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    start_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    priority: Mapped[str] = mapped_column(Text, nullable=False)
    assigned_to: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default=MaintenanceStatus.pending.value,
        server_default=MaintenanceStatus.pending.value,
    )
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
