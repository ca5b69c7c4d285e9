from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from property_api.db.session import get_async_session
from property_api.schemas.settings import (
    BuildingUpdate,
    CategoriesUpdate,
    PreferencesUpdate,
    SettingsRead,
)
from property_api.services.settings import SettingsService

router = APIRouter(prefix="/settings", tags=["Settings"])


# PUBLIC_INTERFACE
@router.get(
    "",
    response_model=SettingsRead,
    summary="Read settings",
    description="Return the building settings, creating the default row on first access.",
)
async def read_settings(session: AsyncSession = Depends(get_async_session)) -> SettingsRead:
    return SettingsRead.model_validate(await SettingsService(session).get_settings())


# PUBLIC_INTERFACE
@router.put("/building", response_model=SettingsRead, summary="Update building info")
async def update_building(
    payload: BuildingUpdate,
    session: AsyncSession = Depends(get_async_session),
) -> SettingsRead:
    return SettingsRead.model_validate(await SettingsService(session).update_building(payload))


# PUBLIC_INTERFACE
@router.put("/preferences", response_model=SettingsRead, summary="Update preferences")
async def update_preferences(
    payload: PreferencesUpdate,
    session: AsyncSession = Depends(get_async_session),
) -> SettingsRead:
    return SettingsRead.model_validate(await SettingsService(session).update_preferences(payload))


# PUBLIC_INTERFACE
@router.put(
    "/categories",
    response_model=SettingsRead,
    summary="Replace finance categories",
    description="Replace both income and expense category lists. Blank and repeated names are dropped.",
)
async def update_categories(
    payload: CategoriesUpdate,
    session: AsyncSession = Depends(get_async_session),
) -> SettingsRead:
    return SettingsRead.model_validate(await SettingsService(session).update_categories(payload))
