from __future__ import annotations

from datetime import date
from typing import List, Optional, Sequence, Tuple
from uuid import UUID

from sqlalchemy import func, or_, select

from property_api.db.models.finances import Transaction
from .base import LIKE_ESCAPE, BaseRepository, contains_pattern


class TransactionRepository(BaseRepository[Transaction]):
    """Repository for ledger transactions."""

    model = Transaction

    @staticmethod
    def _date_range(stmt, start_date: Optional[date], end_date: Optional[date]):
        if start_date:
            stmt = stmt.where(Transaction.date >= start_date)
        if end_date:
            stmt = stmt.where(Transaction.date <= end_date)
        return stmt

    async def list_transactions(
        self,
        *,
        search: Optional[str],
        type: Optional[str],
        room_id: Optional[UUID],
        tenant_id: Optional[UUID],
        start_date: Optional[date],
        end_date: Optional[date],
        page: int,
        limit: int,
    ) -> Tuple[List[Transaction], bool]:
        stmt = select(Transaction)
        if search:
            like = contains_pattern(search)
            stmt = stmt.where(
                or_(
                    Transaction.category.ilike(like, escape=LIKE_ESCAPE),
                    Transaction.description.ilike(like, escape=LIKE_ESCAPE),
                )
            )
        if type:
            stmt = stmt.where(Transaction.type == type)
        if room_id:
            stmt = stmt.where(Transaction.room_id == room_id)
        if tenant_id:
            stmt = stmt.where(Transaction.tenant_id == tenant_id)
        stmt = self._date_range(stmt, start_date, end_date)
        stmt = stmt.order_by(Transaction.date.desc(), Transaction.created_at.desc(), Transaction.id)
        return await self.paginate(stmt, page=page, limit=limit)

    async def sum_amount(
        self,
        *,
        types: Sequence[str],
        start_date: Optional[date],
        end_date: Optional[date],
    ) -> float:
        stmt = select(func.coalesce(func.sum(Transaction.amount), 0)).where(Transaction.type.in_(list(types)))
        stmt = self._date_range(stmt, start_date, end_date)
        result = await self.execute(stmt)
        return float(result.scalar_one() or 0)
