from __future__ import annotations

from datetime import date
from typing import List, Optional, Tuple

from sqlalchemy import or_, select

from property_api.db.models.maintenance import Maintenance
from .base import LIKE_ESCAPE, BaseRepository, contains_pattern


class MaintenanceRepository(BaseRepository[Maintenance]):
    """Repository for maintenance tickets."""

    model = Maintenance

    async def list_tickets(
        self,
        *,
        search: Optional[str],
        status: Optional[str],
        maintenance_type: Optional[str],
        priority: Optional[str],
        start_date: Optional[date],
        end_date: Optional[date],
        page: int,
        limit: int,
    ) -> Tuple[List[Maintenance], bool]:
        stmt = select(Maintenance)
        if search:
            like = contains_pattern(search)
            stmt = stmt.where(
                or_(
                    Maintenance.equipment_name.ilike(like, escape=LIKE_ESCAPE),
                    Maintenance.equipment_id.ilike(like, escape=LIKE_ESCAPE),
                    Maintenance.description.ilike(like, escape=LIKE_ESCAPE),
                )
            )
        if status:
            stmt = stmt.where(Maintenance.status == status)
        if maintenance_type:
            stmt = stmt.where(Maintenance.maintenance_type == maintenance_type)
        if priority:
            stmt = stmt.where(Maintenance.priority == priority)
        if start_date:
            stmt = stmt.where(Maintenance.start_date >= start_date)
        if end_date:
            stmt = stmt.where(Maintenance.start_date <= end_date)
        stmt = stmt.order_by(Maintenance.start_date.desc(), Maintenance.id)
        return await self.paginate(stmt, page=page, limit=limit)
