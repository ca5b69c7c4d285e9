from __future__ import annotations

from typing import List

from pydantic import EmailStr, Field

from property_api.schemas.common import IDModel, Timestamps, CamelModel


class SettingsRead(IDModel, Timestamps):
    """Building settings singleton."""
    building_name: str
    building_address: str
    building_phone: str
    building_email: str
    language: str
    notifications: bool
    email_notifications: bool
    currency: str
    timezone: str
    date_format: str
    income_categories: List[str]
    expense_categories: List[str]


class BuildingUpdate(CamelModel):
    building_name: str = Field(..., min_length=1)
    building_address: str = Field(..., min_length=1)
    building_phone: str = Field(..., min_length=1)
    building_email: EmailStr


class PreferencesUpdate(CamelModel):
    language: str = Field(..., min_length=1)
    notifications: bool
    email_notifications: bool
    currency: str = Field(..., min_length=1)
    timezone: str = Field(..., min_length=1)
    date_format: str = Field(..., min_length=1)


class CategoriesUpdate(CamelModel):
    income: List[str]
    expense: List[str]
