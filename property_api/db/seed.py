"""
Database seeding utilities for minimal reference data.

Seeds:
- Default room types (Studio, Phòng đơn, Phòng đôi, Duplex)
- The building settings row with default preferences and categories
- An admin user, when ADMIN_PASSWORD is configured

Every step is idempotent, so seeding can run on each start.

Usage:
  python -m property_api.db.run_migrations upgrade head
  python -m property_api.db.seed
"""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from property_api.core.enums import UserRole, UserStatus
from property_api.core.security import get_password_hash
from property_api.core.settings import get_app_settings
from property_api.db.models.rooms import RoomType
from property_api.db.session import get_session_maker
from property_api.repositories.security import UserRepository
from property_api.services.settings import SettingsService

logger = logging.getLogger(__name__)

DEFAULT_ROOM_TYPES = [
    ("Studio", "Căn hộ studio khép kín"),
    ("Phòng đơn", "Phòng cho một người"),
    ("Phòng đôi", "Phòng cho hai người"),
    ("Duplex", "Căn hộ hai tầng"),
]


# PUBLIC_INTERFACE
async def seed_all(session: Optional[AsyncSession] = None) -> None:
    """
    Seed the database with minimal reference data.

    When ``session`` is omitted a standalone session is opened from the global
    session factory.
    """
    if session is not None:
        await _seed(session)
        return
    async with get_session_maker()() as own_session:
        await _seed(own_session)


async def _seed(session: AsyncSession) -> None:
    await _seed_room_types(session)
    # creates the singleton with defaults if missing
    await SettingsService(session).get_settings()
    await _seed_admin(session)


async def _seed_room_types(session: AsyncSession) -> None:
    count = (await session.execute(select(func.count(RoomType.id)))).scalar_one()
    if count:
        return
    session.add_all(RoomType(name=name, description=desc) for name, desc in DEFAULT_ROOM_TYPES)
    await session.commit()
    logger.info("Seeded %d room types", len(DEFAULT_ROOM_TYPES))


async def _seed_admin(session: AsyncSession) -> None:
    settings = get_app_settings()
    if not settings.ADMIN_PASSWORD:
        logger.info("ADMIN_PASSWORD not set; skipping admin user")
        return
    repo = UserRepository(session)
    if await repo.get_user_by_email(settings.ADMIN_EMAIL):
        return
    await repo.create(
        name="Administrator",
        email=settings.ADMIN_EMAIL,
        phone="0000000000",
        role=UserRole.admin.value,
        status=UserStatus.active.value,
        hashed_password=get_password_hash(settings.ADMIN_PASSWORD),
    )
    logger.info("Seeded admin user %s", settings.ADMIN_EMAIL)


if __name__ == "__main__":
    asyncio.run(seed_all())
