from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from property_api.db.models.settings import BuildingSettings
from property_api.repositories.settings import SettingsRepository
from property_api.schemas.settings import BuildingUpdate, CategoriesUpdate, PreferencesUpdate
from property_api.services.base import BaseService

logger = logging.getLogger(__name__)


def _clean_categories(names):
    # trimmed, non-empty, first occurrence wins
    seen = []
    for name in names:
        name = name.strip()
        if name and name not in seen:
            seen.append(name)
    return seen


class SettingsService(BaseService):
    """Building settings singleton. The row is created with defaults on first access."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)
        self.repo = SettingsRepository(session)

    async def get_settings(self) -> BuildingSettings:
        current = await self.repo.get_singleton()
        if current is None:
            logger.info("No settings row found; creating defaults")
            current = await self.repo.create_singleton()
        return current

    async def update_building(self, payload: BuildingUpdate) -> BuildingSettings:
        current = await self.get_settings()
        return await self.repo.update(current, self.values(payload))

    async def update_preferences(self, payload: PreferencesUpdate) -> BuildingSettings:
        current = await self.get_settings()
        return await self.repo.update(current, self.values(payload))

    async def update_categories(self, payload: CategoriesUpdate) -> BuildingSettings:
        current = await self.get_settings()
        return await self.repo.update(
            current,
            {
                "income_categories": _clean_categories(payload.income),
                "expense_categories": _clean_categories(payload.expense),
            },
        )
