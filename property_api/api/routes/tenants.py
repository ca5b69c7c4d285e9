from __future__ import annotations

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from property_api.core.deps import PageParams, get_page_params
from property_api.core.enums import TenantStatus
from property_api.db.session import get_async_session
from property_api.schemas.common import MessageResponse, Page, build_page
from property_api.schemas.tenants import TenantCreate, TenantRead, TenantStatusUpdate, TenantUpdate
from property_api.services.tenants import TenantService

router = APIRouter(prefix="/tenants", tags=["Tenants"])


# PUBLIC_INTERFACE
@router.get(
    "",
    response_model=Page[TenantRead],
    summary="List tenants",
    description="List tenants, newest first. Search matches name and email.",
)
async def list_tenants(
    params: PageParams = Depends(get_page_params),
    search: Optional[str] = Query(None),
    status_filter: Optional[TenantStatus] = Query(None, alias="status"),
    room_id: Optional[UUID] = Query(None, alias="roomId"),
    session: AsyncSession = Depends(get_async_session),
) -> Page[TenantRead]:
    rows, has_more = await TenantService(session).list_tenants(
        page=params.page,
        limit=params.limit,
        search=search,
        status=status_filter,
        room_id=room_id,
    )
    return build_page(TenantRead, rows, page=params.page, limit=params.limit, has_more=has_more)


# PUBLIC_INTERFACE
@router.get("/{tenant_id}", response_model=TenantRead, summary="Get tenant")
async def get_tenant(tenant_id: UUID, session: AsyncSession = Depends(get_async_session)) -> TenantRead:
    return TenantRead.model_validate(await TenantService(session).get_tenant(tenant_id))


# PUBLIC_INTERFACE
@router.post(
    "",
    response_model=TenantRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create tenant",
    description="Register a tenant. New tenants are active; roomId, when given, must exist.",
)
async def create_tenant(payload: TenantCreate, session: AsyncSession = Depends(get_async_session)) -> TenantRead:
    return TenantRead.model_validate(await TenantService(session).create_tenant(payload))


# PUBLIC_INTERFACE
@router.patch("/{tenant_id}", response_model=TenantRead, summary="Update tenant")
async def update_tenant(
    tenant_id: UUID,
    payload: TenantUpdate,
    session: AsyncSession = Depends(get_async_session),
) -> TenantRead:
    return TenantRead.model_validate(await TenantService(session).update_tenant(tenant_id, payload))


# PUBLIC_INTERFACE
@router.patch("/{tenant_id}/status", response_model=TenantRead, summary="Change tenant status")
async def update_tenant_status(
    tenant_id: UUID,
    payload: TenantStatusUpdate,
    session: AsyncSession = Depends(get_async_session),
) -> TenantRead:
    return TenantRead.model_validate(await TenantService(session).update_status(tenant_id, payload.status))


# PUBLIC_INTERFACE
@router.delete("/{tenant_id}", response_model=MessageResponse, summary="Delete tenant")
async def delete_tenant(tenant_id: UUID, session: AsyncSession = Depends(get_async_session)) -> MessageResponse:
    await TenantService(session).delete_tenant(tenant_id)
    return MessageResponse(message="Tenant deleted successfully")
