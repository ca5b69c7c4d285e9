from __future__ import annotations

from datetime import date
from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from property_api.core.enums import MaintenancePriority, MaintenanceStatus, MaintenanceType
from property_api.core.exceptions import NotFoundError
from property_api.db.models.maintenance import Maintenance
from property_api.repositories.maintenance import MaintenanceRepository
from property_api.schemas.maintenance import MaintenanceCreate, MaintenanceUpdate
from property_api.services.base import BaseService


class MaintenanceService(BaseService):
    """Maintenance tickets for building equipment."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)
        self.repo = MaintenanceRepository(session)

    async def list_tickets(
        self,
        *,
        page: int,
        limit: int,
        search: Optional[str] = None,
        status: Optional[MaintenanceStatus] = None,
        maintenance_type: Optional[MaintenanceType] = None,
        priority: Optional[MaintenancePriority] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> Tuple[List[Maintenance], bool]:
        return await self.repo.list_tickets(
            search=search,
            status=status.value if status else None,
            maintenance_type=maintenance_type.value if maintenance_type else None,
            priority=priority.value if priority else None,
            start_date=start_date,
            end_date=end_date,
            page=page,
            limit=limit,
        )

    async def get_ticket(self, ticket_id: UUID) -> Maintenance:
        ticket = await self.repo.get_by_id(ticket_id)
        if ticket is None:
            raise NotFoundError.for_entity("Maintenance", ticket_id)
        return ticket

    async def create_ticket(self, payload: MaintenanceCreate) -> Maintenance:
        values = self.values(payload)
        values["status"] = MaintenanceStatus.pending.value
        return await self.repo.create(**values)

    async def update_ticket(self, ticket_id: UUID, payload: MaintenanceUpdate) -> Maintenance:
        ticket = await self.get_ticket(ticket_id)
        return await self.repo.update(ticket, self.changes(payload, nullable=("notes",)))

    async def update_status(
        self, ticket_id: UUID, status: MaintenanceStatus, notes: Optional[str] = None
    ) -> Maintenance:
        ticket = await self.get_ticket(ticket_id)
        values = {"status": status.value}
        if notes is not None:
            values["notes"] = notes
        return await self.repo.update(ticket, values)

    async def delete_ticket(self, ticket_id: UUID) -> None:
        ticket = await self.get_ticket(ticket_id)
        await self.repo.delete(ticket)
