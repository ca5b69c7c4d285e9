from __future__ import annotations

import datetime as dt
from typing import Optional
from uuid import UUID

from pydantic import Field

from property_api.core.enums import TransactionType
from property_api.schemas.common import CamelModel, IDModel, Timestamps
from property_api.schemas.rooms import RoomSummary
from property_api.schemas.tenants import TenantSummary


class TransactionRead(IDModel, Timestamps):
    """Ledger entry read model."""
    type: TransactionType
    amount: float
    category: str
    description: Optional[str] = None
    date: dt.date
    room_id: Optional[UUID] = None
    tenant_id: Optional[UUID] = None
    room: Optional[RoomSummary] = None
    tenant: Optional[TenantSummary] = None


class TransactionCreate(CamelModel):
    """Create ledger entry; room and tenant are optional references."""
    type: TransactionType
    amount: float = Field(..., gt=0)
    category: str = Field(..., min_length=1)
    description: Optional[str] = None
    date: dt.date
    room_id: Optional[UUID] = None
    tenant_id: Optional[UUID] = None


class TransactionUpdate(CamelModel):
    """Partial ledger entry update."""
    type: Optional[TransactionType] = None
    amount: Optional[float] = Field(None, gt=0)
    category: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    date: Optional[dt.date] = None
    room_id: Optional[UUID] = None
    tenant_id: Optional[UUID] = None


class TransactionSummary(CamelModel):
    """Totals over a date range."""
    start_date: Optional[dt.date] = None
    end_date: Optional[dt.date] = None
    total_income: float
    total_expense: float
    balance: float
