from __future__ import annotations

from datetime import date
from typing import List, Optional
from uuid import UUID

from pydantic import Field

from property_api.core.enums import ContractStatus
from property_api.schemas.common import CamelModel, IDModel, Timestamps
from property_api.schemas.rooms import RoomSummary
from property_api.schemas.tenants import TenantSummary


class ContractRead(IDModel, Timestamps):
    """Contract read model with embedded tenant and room."""
    tenant_id: UUID
    room_id: UUID
    tenant: Optional[TenantSummary] = None
    room: Optional[RoomSummary] = None
    start_date: date
    end_date: date
    deposit: float
    monthly_rent: float
    terms: List[str] = Field(default_factory=list)
    status: ContractStatus
    termination_reason: Optional[str] = None
    termination_date: Optional[date] = None


class ContractCreate(CamelModel):
    """Create contract payload. New contracts are always active."""
    tenant_id: UUID
    room_id: UUID
    start_date: date
    end_date: date
    deposit: float = Field(..., ge=0)
    monthly_rent: float = Field(..., ge=0)
    terms: List[str] = Field(..., min_length=1)


class ContractUpdate(CamelModel):
    """Partial contract update. Status changes go through renew/terminate."""
    tenant_id: Optional[UUID] = None
    room_id: Optional[UUID] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    deposit: Optional[float] = Field(None, ge=0)
    monthly_rent: Optional[float] = Field(None, ge=0)
    terms: Optional[List[str]] = None


class ContractRenew(CamelModel):
    """Renewal payload: new end date and optionally a new monthly rent."""
    new_end_date: date
    new_monthly_rent: Optional[float] = Field(None, ge=0)


class ContractTerminate(CamelModel):
    """Termination payload."""
    reason: str = Field(..., min_length=1)
    termination_date: date


class ExpiredSweepResult(CamelModel):
    """Outcome of an expiry sweep."""
    expired: int = Field(..., description="Number of contracts flipped to expired")
