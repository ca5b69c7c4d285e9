from __future__ import annotations

from datetime import date
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from property_api.core.deps import PageParams, get_page_params
from property_api.core.enums import TransactionType
from property_api.db.session import get_async_session
from property_api.schemas.common import MessageResponse, Page, build_page
from property_api.schemas.transactions import (
    TransactionCreate,
    TransactionRead,
    TransactionSummary,
    TransactionUpdate,
)
from property_api.services.transactions import TransactionService

router = APIRouter(prefix="/transactions", tags=["Transactions"])


# PUBLIC_INTERFACE
@router.get(
    "",
    response_model=Page[TransactionRead],
    summary="List transactions",
    description="List ledger entries by date, newest first. startDate/endDate are inclusive.",
)
async def list_transactions(
    params: PageParams = Depends(get_page_params),
    search: Optional[str] = Query(None, description="Matches category and description"),
    type_filter: Optional[TransactionType] = Query(None, alias="type"),
    room_id: Optional[UUID] = Query(None, alias="roomId"),
    tenant_id: Optional[UUID] = Query(None, alias="tenantId"),
    start_date: Optional[date] = Query(None, alias="startDate"),
    end_date: Optional[date] = Query(None, alias="endDate"),
    session: AsyncSession = Depends(get_async_session),
) -> Page[TransactionRead]:
    rows, has_more = await TransactionService(session).list_transactions(
        page=params.page,
        limit=params.limit,
        search=search,
        type=type_filter,
        room_id=room_id,
        tenant_id=tenant_id,
        start_date=start_date,
        end_date=end_date,
    )
    return build_page(TransactionRead, rows, page=params.page, limit=params.limit, has_more=has_more)


# PUBLIC_INTERFACE
@router.get(
    "/summary",
    response_model=TransactionSummary,
    summary="Income and expense totals",
    description="Sum income (income, rent, deposit) and expense (expense, refund) over an optional date range.",
)
async def transaction_summary(
    start_date: Optional[date] = Query(None, alias="startDate"),
    end_date: Optional[date] = Query(None, alias="endDate"),
    session: AsyncSession = Depends(get_async_session),
) -> TransactionSummary:
    return await TransactionService(session).summarize(start_date=start_date, end_date=end_date)


# PUBLIC_INTERFACE
@router.get("/{transaction_id}", response_model=TransactionRead, summary="Get transaction")
async def get_transaction(transaction_id: UUID, session: AsyncSession = Depends(get_async_session)) -> TransactionRead:
    return TransactionRead.model_validate(await TransactionService(session).get_transaction(transaction_id))


# PUBLIC_INTERFACE
@router.post("", response_model=TransactionRead, status_code=status.HTTP_201_CREATED, summary="Create transaction")
async def create_transaction(
    payload: TransactionCreate,
    session: AsyncSession = Depends(get_async_session),
) -> TransactionRead:
    return TransactionRead.model_validate(await TransactionService(session).create_transaction(payload))


# PUBLIC_INTERFACE
@router.patch("/{transaction_id}", response_model=TransactionRead, summary="Update transaction")
async def update_transaction(
    transaction_id: UUID,
    payload: TransactionUpdate,
    session: AsyncSession = Depends(get_async_session),
) -> TransactionRead:
    return TransactionRead.model_validate(
        await TransactionService(session).update_transaction(transaction_id, payload)
    )


# PUBLIC_INTERFACE
@router.delete("/{transaction_id}", response_model=MessageResponse, summary="Delete transaction")
async def delete_transaction(
    transaction_id: UUID,
    session: AsyncSession = Depends(get_async_session),
) -> MessageResponse:
    await TransactionService(session).delete_transaction(transaction_id)
    return MessageResponse(message="Transaction deleted successfully")
