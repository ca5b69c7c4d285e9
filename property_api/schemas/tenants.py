from __future__ import annotations

from datetime import date
from typing import Optional
from uuid import UUID

from pydantic import EmailStr, Field

from property_api.core.enums import TenantStatus
from property_api.schemas.common import CamelModel, IDModel, Timestamps
from property_api.schemas.rooms import RoomSummary

PHONE_PATTERN = r"^\+?[0-9][0-9 .-]{6,18}[0-9]$"


class TenantSummary(IDModel):
    """Compact tenant reference embedded in other resources."""
    name: str
    email: str
    phone: str


class TenantRead(IDModel, Timestamps):
    """Tenant read model."""
    name: str
    email: str
    phone: str
    identity_card: Optional[str] = None
    date_of_birth: Optional[date] = None
    address: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    room_id: Optional[UUID] = None
    room: Optional[RoomSummary] = None
    avatar: Optional[str] = None
    status: TenantStatus


class TenantCreate(CamelModel):
    """Create tenant payload. Tenants always start active."""
    name: str = Field(..., min_length=1)
    email: EmailStr
    phone: str = Field(..., pattern=PHONE_PATTERN)
    identity_card: Optional[str] = None
    date_of_birth: Optional[date] = None
    address: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    room_id: Optional[UUID] = Field(None, description="Room the tenant lives in")
    avatar: Optional[str] = None


class TenantUpdate(CamelModel):
    """Partial tenant update."""
    name: Optional[str] = Field(None, min_length=1)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, pattern=PHONE_PATTERN)
    identity_card: Optional[str] = None
    date_of_birth: Optional[date] = None
    address: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    room_id: Optional[UUID] = None
    avatar: Optional[str] = None


class TenantStatusUpdate(CamelModel):
    status: TenantStatus
