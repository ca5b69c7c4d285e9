from __future__ import annotations

from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy import func, or_, select

from property_api.db.models.contracts import Contract
from property_api.db.models.rooms import Room, RoomType
from .base import LIKE_ESCAPE, BaseRepository, contains_pattern


class RoomTypeRepository(BaseRepository[RoomType]):
    """Repository for room types."""

    model = RoomType

    async def list_room_types(self, *, search: Optional[str] = None) -> List[RoomType]:
        stmt = select(RoomType)
        if search:
            stmt = stmt.where(RoomType.name.ilike(contains_pattern(search), escape=LIKE_ESCAPE))
        stmt = stmt.order_by(RoomType.name)
        return list(await self.scalars(stmt))

    async def count_rooms(self, room_type_id: UUID) -> int:
        stmt = select(func.count(Room.id)).where(Room.room_type_id == room_type_id)
        result = await self.execute(stmt)
        return int(result.scalar_one())


class RoomRepository(BaseRepository[Room]):
    """Repository for rooms."""

    model = Room

    async def list_rooms(
        self,
        *,
        search: Optional[str],
        status: Optional[str],
        room_type_id: Optional[UUID],
        page: int,
        limit: int,
    ) -> Tuple[List[Room], bool]:
        stmt = select(Room)
        if search:
            like = contains_pattern(search)
            stmt = stmt.where(
                or_(
                    Room.name.ilike(like, escape=LIKE_ESCAPE),
                    Room.description.ilike(like, escape=LIKE_ESCAPE),
                )
            )
        if status:
            stmt = stmt.where(Room.status == status)
        if room_type_id:
            stmt = stmt.where(Room.room_type_id == room_type_id)
        stmt = stmt.order_by(Room.name, Room.id)
        return await self.paginate(stmt, page=page, limit=limit)

    async def count_contracts(self, room_id: UUID) -> int:
        stmt = select(func.count(Contract.id)).where(Contract.room_id == room_id)
        result = await self.execute(stmt)
        return int(result.scalar_one())
