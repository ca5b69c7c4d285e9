from __future__ import annotations

from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy import func, or_, select

from property_api.db.models.contracts import Contract
from property_api.db.models.tenants import Tenant
from .base import LIKE_ESCAPE, BaseRepository, contains_pattern


class TenantRepository(BaseRepository[Tenant]):
    """Repository for tenants."""

    model = Tenant

    async def list_tenants(
        self,
        *,
        search: Optional[str],
        status: Optional[str],
        room_id: Optional[UUID],
        page: int,
        limit: int,
    ) -> Tuple[List[Tenant], bool]:
        stmt = select(Tenant)
        if search:
            like = contains_pattern(search)
            stmt = stmt.where(
                or_(
                    Tenant.name.ilike(like, escape=LIKE_ESCAPE),
                    Tenant.email.ilike(like, escape=LIKE_ESCAPE),
                )
            )
        if status:
            stmt = stmt.where(Tenant.status == status)
        if room_id:
            stmt = stmt.where(Tenant.room_id == room_id)
        stmt = stmt.order_by(Tenant.created_at.desc(), Tenant.id)
        return await self.paginate(stmt, page=page, limit=limit)

    async def count_contracts(self, tenant_id: UUID) -> int:
        stmt = select(func.count(Contract.id)).where(Contract.tenant_id == tenant_id)
        result = await self.execute(stmt)
        return int(result.scalar_one())
