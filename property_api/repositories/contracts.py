from __future__ import annotations

from datetime import date
from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy import or_, select, update

from property_api.core.enums import ContractStatus
from property_api.db.models.contracts import Contract
from property_api.db.models.rooms import Room
from property_api.db.models.tenants import Tenant
from .base import LIKE_ESCAPE, BaseRepository, contains_pattern


class ContractRepository(BaseRepository[Contract]):
    """Repository for rental contracts."""

    model = Contract

    async def list_contracts(
        self,
        *,
        search: Optional[str],
        status: Optional[str],
        tenant_id: Optional[UUID],
        room_id: Optional[UUID],
        page: int,
        limit: int,
    ) -> Tuple[List[Contract], bool]:
        stmt = select(Contract)
        if search:
            like = contains_pattern(search)
            stmt = (
                stmt.join(Tenant, Contract.tenant_id == Tenant.id)
                .join(Room, Contract.room_id == Room.id)
                .where(
                    or_(
                        Tenant.name.ilike(like, escape=LIKE_ESCAPE),
                        Room.name.ilike(like, escape=LIKE_ESCAPE),
                    )
                )
            )
        if status:
            stmt = stmt.where(Contract.status == status)
        if tenant_id:
            stmt = stmt.where(Contract.tenant_id == tenant_id)
        if room_id:
            stmt = stmt.where(Contract.room_id == room_id)
        stmt = stmt.order_by(Contract.start_date.desc(), Contract.id)
        return await self.paginate(stmt, page=page, limit=limit)

    async def list_overdue_active_ids(self, today: date) -> List[UUID]:
        stmt = select(Contract.id).where(
            Contract.status == ContractStatus.active.value,
            Contract.end_date < today,
        )
        return list(await self.scalars(stmt))

    async def mark_expired(self, contract_ids: List[UUID]) -> int:
        """Flip the given contracts to expired; rows no longer active are skipped."""
        if not contract_ids:
            return 0
        stmt = (
            update(Contract)
            .where(Contract.id.in_(contract_ids), Contract.status == ContractStatus.active.value)
            .values(status=ContractStatus.expired.value)
            .execution_options(synchronize_session="fetch")
        )
        result = await self.execute(stmt)
        await self.commit()
        return int(result.rowcount or 0)
