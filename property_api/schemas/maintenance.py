from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import Field

from property_api.core.enums import MaintenancePriority, MaintenanceStatus, MaintenanceType
from property_api.schemas.common import CamelModel, IDModel, Timestamps


class MaintenanceRead(IDModel, Timestamps):
    """Maintenance ticket read model."""
    equipment_id: str
    equipment_name: str
    maintenance_type: MaintenanceType
    description: str
    start_date: date
    priority: MaintenancePriority
    assigned_to: str
    status: MaintenanceStatus
    notes: Optional[str] = None


class MaintenanceCreate(CamelModel):
    """Open a maintenance ticket. Tickets start pending."""
    equipment_id: str = Field(..., min_length=1)
    equipment_name: str = Field(..., min_length=1)
    maintenance_type: MaintenanceType
    description: str = Field(..., min_length=1)
    start_date: date
    priority: MaintenancePriority
    assigned_to: str = Field(..., min_length=1)


class MaintenanceUpdate(CamelModel):
    """Partial ticket update."""
    equipment_id: Optional[str] = Field(None, min_length=1)
    equipment_name: Optional[str] = Field(None, min_length=1)
    maintenance_type: Optional[MaintenanceType] = None
    description: Optional[str] = Field(None, min_length=1)
    start_date: Optional[date] = None
    priority: Optional[MaintenancePriority] = None
    assigned_to: Optional[str] = Field(None, min_length=1)
    status: Optional[MaintenanceStatus] = None
    notes: Optional[str] = None


class MaintenanceStatusUpdate(CamelModel):
    status: MaintenanceStatus
    notes: Optional[str] = None
