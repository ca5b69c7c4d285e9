from __future__ import annotations

import uuid
from typing import List

from sqlalchemy import Boolean, Text
from sqlalchemy.orm import Mapped, mapped_column

from property_api.db.base import Base, JSONType, TimestampMixin, UUIDPkMixin

DEFAULT_INCOME_CATEGORIES = ["Tiền thuê phòng", "Tiền cọc", "Khác"]
DEFAULT_EXPENSE_CATEGORIES = ["Điện", "Nước", "Internet", "Bảo trì", "Khác"]

# The settings table holds exactly one row, always under this key
SETTINGS_ID = uuid.UUID(int=1)


class BuildingSettings(UUIDPkMixin, TimestampMixin, Base):
    """Singleton row holding building info, preferences and finance categories."""
    __tablename__ = "settings"

    building_name: Mapped[str] = mapped_column(Text, nullable=False, default="", server_default="")
    building_address: Mapped[str] = mapped_column(Text, nullable=False, default="", server_default="")
    building_phone: Mapped[str] = mapped_column(Text, nullable=False, default="", server_default="")
    building_email: Mapped[str] = mapped_column(Text, nullable=False, default="", server_default="")

    language: Mapped[str] = mapped_column(Text, nullable=False, default="vi", server_default="vi")
    notifications: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True, server_default="true")
    email_notifications: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True, server_default="true"
    )
    currency: Mapped[str] = mapped_column(Text, nullable=False, default="VND", server_default="VND")
    timezone: Mapped[str] = mapped_column(
        Text, nullable=False, default="Asia/Ho_Chi_Minh", server_default="Asia/Ho_Chi_Minh"
    )
    date_format: Mapped[str] = mapped_column(Text, nullable=False, default="DD/MM/YYYY", server_default="DD/MM/YYYY")

    income_categories: Mapped[List[str]] = mapped_column(
        JSONType, nullable=False, default=lambda: list(DEFAULT_INCOME_CATEGORIES)
    )
    expense_categories: Mapped[List[str]] = mapped_column(
        JSONType, nullable=False, default=lambda: list(DEFAULT_EXPENSE_CATEGORIES)
    )
