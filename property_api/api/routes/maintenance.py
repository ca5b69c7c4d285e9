from __future__ import annotations

from datetime import date
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from property_api.core.deps import PageParams, get_page_params
from property_api.core.enums import MaintenancePriority, MaintenanceStatus, MaintenanceType
from property_api.db.session import get_async_session
from property_api.schemas.common import MessageResponse, Page, build_page
from property_api.schemas.maintenance import (
    MaintenanceCreate,
    MaintenanceRead,
    MaintenanceStatusUpdate,
    MaintenanceUpdate,
)
from property_api.services.maintenance import MaintenanceService

router = APIRouter(prefix="/maintenance", tags=["Maintenance"])


# PUBLIC_INTERFACE
@router.get(
    "",
    response_model=Page[MaintenanceRead],
    summary="List maintenance tickets",
    description="Search matches equipment name, equipment id and description; dates filter on startDate.",
)
async def list_tickets(
    params: PageParams = Depends(get_page_params),
    search: Optional[str] = Query(None),
    status_filter: Optional[MaintenanceStatus] = Query(None, alias="status"),
    maintenance_type: Optional[MaintenanceType] = Query(None, alias="type"),
    priority: Optional[MaintenancePriority] = Query(None),
    start_date: Optional[date] = Query(None, alias="startDate"),
    end_date: Optional[date] = Query(None, alias="endDate"),
    session: AsyncSession = Depends(get_async_session),
) -> Page[MaintenanceRead]:
    rows, has_more = await MaintenanceService(session).list_tickets(
        page=params.page,
        limit=params.limit,
        search=search,
        status=status_filter,
        maintenance_type=maintenance_type,
        priority=priority,
        start_date=start_date,
        end_date=end_date,
    )
    return build_page(MaintenanceRead, rows, page=params.page, limit=params.limit, has_more=has_more)


# PUBLIC_INTERFACE
@router.get("/{ticket_id}", response_model=MaintenanceRead, summary="Get maintenance ticket")
async def get_ticket(ticket_id: UUID, session: AsyncSession = Depends(get_async_session)) -> MaintenanceRead:
    return MaintenanceRead.model_validate(await MaintenanceService(session).get_ticket(ticket_id))


# PUBLIC_INTERFACE
@router.post(
    "",
    response_model=MaintenanceRead,
    status_code=status.HTTP_201_CREATED,
    summary="Open maintenance ticket",
    description="Create a ticket in pending status.",
)
async def create_ticket(
    payload: MaintenanceCreate,
    session: AsyncSession = Depends(get_async_session),
) -> MaintenanceRead:
    return MaintenanceRead.model_validate(await MaintenanceService(session).create_ticket(payload))


# PUBLIC_INTERFACE
@router.patch("/{ticket_id}", response_model=MaintenanceRead, summary="Update maintenance ticket")
async def update_ticket(
    ticket_id: UUID,
    payload: MaintenanceUpdate,
    session: AsyncSession = Depends(get_async_session),
) -> MaintenanceRead:
    return MaintenanceRead.model_validate(await MaintenanceService(session).update_ticket(ticket_id, payload))


# PUBLIC_INTERFACE
@router.patch("/{ticket_id}/status", response_model=MaintenanceRead, summary="Change ticket status")
async def update_ticket_status(
    ticket_id: UUID,
    payload: MaintenanceStatusUpdate,
    session: AsyncSession = Depends(get_async_session),
) -> MaintenanceRead:
    ticket = await MaintenanceService(session).update_status(ticket_id, payload.status, payload.notes)
    return MaintenanceRead.model_validate(ticket)


# PUBLIC_INTERFACE
@router.delete("/{ticket_id}", response_model=MessageResponse, summary="Delete maintenance ticket")
async def delete_ticket(ticket_id: UUID, session: AsyncSession = Depends(get_async_session)) -> MessageResponse:
    await MaintenanceService(session).delete_ticket(ticket_id)
    return MessageResponse(message="Maintenance deleted successfully")
