from __future__ import annotations

from datetime import date
from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from property_api.core.enums import (
    EXPENSE_TRANSACTION_TYPES,
    INCOME_TRANSACTION_TYPES,
    TransactionType,
)
from property_api.core.exceptions import BusinessRuleError, NotFoundError
from property_api.db.models.finances import Transaction
from property_api.repositories.rooms import RoomRepository
from property_api.repositories.tenants import TenantRepository
from property_api.repositories.transactions import TransactionRepository
from property_api.schemas.transactions import (
    TransactionCreate,
    TransactionSummary,
    TransactionUpdate,
)
from property_api.services.base import BaseService


class TransactionService(BaseService):
    """Income and expense ledger."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)
        self.repo = TransactionRepository(session)
        self.rooms = RoomRepository(session)
        self.tenants = TenantRepository(session)

    async def list_transactions(
        self,
        *,
        page: int,
        limit: int,
        search: Optional[str] = None,
        type: Optional[TransactionType] = None,
        room_id: Optional[UUID] = None,
        tenant_id: Optional[UUID] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> Tuple[List[Transaction], bool]:
        return await self.repo.list_transactions(
            search=search,
            type=type.value if type else None,
            room_id=room_id,
            tenant_id=tenant_id,
            start_date=start_date,
            end_date=end_date,
            page=page,
            limit=limit,
        )

    async def get_transaction(self, transaction_id: UUID) -> Transaction:
        transaction = await self.repo.get_by_id(transaction_id)
        if transaction is None:
            raise NotFoundError.for_entity("Transaction", transaction_id)
        return transaction

    async def _require_refs(self, room_id: Optional[UUID], tenant_id: Optional[UUID]) -> None:
        if room_id is not None and not await self.rooms.exists(room_id):
            raise NotFoundError.for_entity("Room", room_id)
        if tenant_id is not None and not await self.tenants.exists(tenant_id):
            raise NotFoundError.for_entity("Tenant", tenant_id)

    async def create_transaction(self, payload: TransactionCreate) -> Transaction:
        await self._require_refs(payload.room_id, payload.tenant_id)
        return await self.repo.create(**self.values(payload))

    async def update_transaction(self, transaction_id: UUID, payload: TransactionUpdate) -> Transaction:
        transaction = await self.get_transaction(transaction_id)
        values = self.changes(payload, nullable=("description", "room_id", "tenant_id"))
        await self._require_refs(values.get("room_id"), values.get("tenant_id"))
        return await self.repo.update(transaction, values)

    async def delete_transaction(self, transaction_id: UUID) -> None:
        transaction = await self.get_transaction(transaction_id)
        await self.repo.delete(transaction)

    async def summarize(
        self,
        *,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> TransactionSummary:
        """Income, expense and balance over an inclusive date range (open ends allowed)."""
        if start_date and end_date and end_date < start_date:
            raise BusinessRuleError("End date must not be before start date")
        income = await self.repo.sum_amount(
            types=[t.value for t in INCOME_TRANSACTION_TYPES],
            start_date=start_date,
            end_date=end_date,
        )
        expense = await self.repo.sum_amount(
            types=[t.value for t in EXPENSE_TRANSACTION_TYPES],
            start_date=start_date,
            end_date=end_date,
        )
        return TransactionSummary(
            start_date=start_date,
            end_date=end_date,
            total_income=income,
            total_expense=expense,
            balance=income - expense,
        )
