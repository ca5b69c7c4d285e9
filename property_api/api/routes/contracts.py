from __future__ import annotations

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from property_api.core.deps import PageParams, get_page_params
from property_api.core.enums import ContractStatus
from property_api.db.session import get_async_session
from property_api.schemas.common import MessageResponse, Page, build_page
from property_api.schemas.contracts import (
    ContractCreate,
    ContractRead,
    ContractRenew,
    ContractTerminate,
    ContractUpdate,
    ExpiredSweepResult,
)
from property_api.services.contracts import ContractService

router = APIRouter(prefix="/contracts", tags=["Contracts"])


# PUBLIC_INTERFACE
@router.get(
    "",
    response_model=Page[ContractRead],
    summary="List contracts",
    description="List contracts by start date, newest first. Search matches tenant name and room name.",
)
async def list_contracts(
    params: PageParams = Depends(get_page_params),
    search: Optional[str] = Query(None),
    status_filter: Optional[ContractStatus] = Query(None, alias="status"),
    tenant_id: Optional[UUID] = Query(None, alias="tenantId"),
    room_id: Optional[UUID] = Query(None, alias="roomId"),
    session: AsyncSession = Depends(get_async_session),
) -> Page[ContractRead]:
    rows, has_more = await ContractService(session).list_contracts(
        page=params.page,
        limit=params.limit,
        search=search,
        status=status_filter,
        tenant_id=tenant_id,
        room_id=room_id,
    )
    return build_page(ContractRead, rows, page=params.page, limit=params.limit, has_more=has_more)


# PUBLIC_INTERFACE
@router.post(
    "/check-expired",
    response_model=ExpiredSweepResult,
    summary="Expire overdue contracts",
    description="Mark every active contract whose end date has passed as expired. Also runs on a schedule.",
)
async def check_expired_contracts(session: AsyncSession = Depends(get_async_session)) -> ExpiredSweepResult:
    expired = await ContractService(session).check_expired_contracts()
    return ExpiredSweepResult(expired=expired)


# PUBLIC_INTERFACE
@router.get("/{contract_id}", response_model=ContractRead, summary="Get contract")
async def get_contract(contract_id: UUID, session: AsyncSession = Depends(get_async_session)) -> ContractRead:
    return ContractRead.model_validate(await ContractService(session).get_contract(contract_id))


# PUBLIC_INTERFACE
@router.post(
    "",
    response_model=ContractRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create contract",
    description="Create an active contract. Tenant and room must exist and endDate must follow startDate.",
)
async def create_contract(payload: ContractCreate, session: AsyncSession = Depends(get_async_session)) -> ContractRead:
    return ContractRead.model_validate(await ContractService(session).create_contract(payload))


# PUBLIC_INTERFACE
@router.patch("/{contract_id}", response_model=ContractRead, summary="Update contract")
@router.post(
    "/{contract_id}",
    response_model=ContractRead,
    summary="Update contract (POST)",
    description="Same partial update as PATCH, kept for clients that update contracts with POST.",
)
async def update_contract(
    contract_id: UUID,
    payload: ContractUpdate,
    session: AsyncSession = Depends(get_async_session),
) -> ContractRead:
    return ContractRead.model_validate(await ContractService(session).update_contract(contract_id, payload))


# PUBLIC_INTERFACE
@router.post(
    "/{contract_id}/renew",
    response_model=ContractRead,
    summary="Renew contract",
    description="Extend an active contract to a later end date, optionally with a new monthly rent.",
)
async def renew_contract(
    contract_id: UUID,
    payload: ContractRenew,
    session: AsyncSession = Depends(get_async_session),
) -> ContractRead:
    return ContractRead.model_validate(await ContractService(session).renew_contract(contract_id, payload))


# PUBLIC_INTERFACE
@router.post(
    "/{contract_id}/terminate",
    response_model=ContractRead,
    summary="Terminate contract",
    description="End an active contract early, recording the reason and date.",
)
async def terminate_contract(
    contract_id: UUID,
    payload: ContractTerminate,
    session: AsyncSession = Depends(get_async_session),
) -> ContractRead:
    return ContractRead.model_validate(await ContractService(session).terminate_contract(contract_id, payload))


# PUBLIC_INTERFACE
@router.delete("/{contract_id}", response_model=MessageResponse, summary="Delete contract")
async def delete_contract(contract_id: UUID, session: AsyncSession = Depends(get_async_session)) -> MessageResponse:
    await ContractService(session).delete_contract(contract_id)
    return MessageResponse(message="Contract deleted successfully")
