from __future__ import annotations

from typing import Optional

from sqlalchemy.exc import IntegrityError

from property_api.db.models.settings import SETTINGS_ID, BuildingSettings
from .base import BaseRepository


class SettingsRepository(BaseRepository[BuildingSettings]):
    """Repository for the building settings singleton."""

    model = BuildingSettings

    async def get_singleton(self) -> Optional[BuildingSettings]:
        return await self.get_by_id(SETTINGS_ID)

    async def create_singleton(self) -> BuildingSettings:
        """
        Insert the default row under the fixed key.

        When a concurrent request inserted it first, the primary key rejects
        this insert and the existing row is returned instead.
        """
        try:
            return await self.create(id=SETTINGS_ID)
        except IntegrityError:
            await self.session.rollback()
            existing = await self.get_singleton()
            if existing is None:
                raise
            return existing
