from __future__ import annotations

from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from property_api.core.enums import TenantStatus
from property_api.core.exceptions import BusinessRuleError, NotFoundError
from property_api.db.models.tenants import Tenant
from property_api.repositories.rooms import RoomRepository
from property_api.repositories.tenants import TenantRepository
from property_api.schemas.tenants import TenantCreate, TenantUpdate
from property_api.services.base import BaseService

TENANT_NULLABLE = (
    "identity_card",
    "date_of_birth",
    "address",
    "start_date",
    "end_date",
    "room_id",
    "avatar",
)


class TenantService(BaseService):
    """Tenants: CRUD plus status changes. A tenant may point at one room."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)
        self.repo = TenantRepository(session)
        self.rooms = RoomRepository(session)

    async def list_tenants(
        self,
        *,
        page: int,
        limit: int,
        search: Optional[str] = None,
        status: Optional[TenantStatus] = None,
        room_id: Optional[UUID] = None,
    ) -> Tuple[List[Tenant], bool]:
        return await self.repo.list_tenants(
            search=search,
            status=status.value if status else None,
            room_id=room_id,
            page=page,
            limit=limit,
        )

    async def get_tenant(self, tenant_id: UUID) -> Tenant:
        tenant = await self.repo.get_by_id(tenant_id)
        if tenant is None:
            raise NotFoundError.for_entity("Tenant", tenant_id)
        return tenant

    async def _require_room(self, room_id: Optional[UUID]) -> None:
        if room_id is not None and not await self.rooms.exists(room_id):
            raise NotFoundError.for_entity("Room", room_id)

    async def create_tenant(self, payload: TenantCreate) -> Tenant:
        await self._require_room(payload.room_id)
        values = self.values(payload)
        values["status"] = TenantStatus.active.value
        return await self.repo.create(**values)

    async def update_tenant(self, tenant_id: UUID, payload: TenantUpdate) -> Tenant:
        tenant = await self.get_tenant(tenant_id)
        values = self.changes(payload, nullable=TENANT_NULLABLE)
        await self._require_room(values.get("room_id"))
        return await self.repo.update(tenant, values)

    async def update_status(self, tenant_id: UUID, status: TenantStatus) -> Tenant:
        tenant = await self.get_tenant(tenant_id)
        return await self.repo.update(tenant, {"status": status.value})

    async def delete_tenant(self, tenant_id: UUID) -> None:
        tenant = await self.get_tenant(tenant_id)
        contracts = await self.repo.count_contracts(tenant_id)
        if contracts:
            raise BusinessRuleError(
                f"Tenant has {contracts} contract(s) and cannot be deleted",
                details={"contracts": contracts},
            )
        await self.repo.delete(tenant)
