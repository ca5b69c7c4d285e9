from __future__ import annotations

from typing import Optional

from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column

from property_api.core.enums import UserRole, UserStatus
from property_api.db.base import Base, TimestampMixin, UUIDPkMixin


class User(UUIDPkMixin, TimestampMixin, Base):
    """Back office staff account."""
    __tablename__ = "users"

    name: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    phone: Mapped[str] = mapped_column(Text, nullable=False)
    role: Mapped[str] = mapped_column(Text, nullable=False, default=UserRole.staff.value)
    status: Mapped[str] = mapped_column(
        Text, nullable=False, default=UserStatus.active.value, server_default=UserStatus.active.value
    )
    hashed_password: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
