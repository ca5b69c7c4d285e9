from __future__ import annotations

import logging
from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from property_api.core.enums import RoomStatus
from property_api.core.exceptions import BusinessRuleError, NotFoundError
from property_api.db.models.rooms import Room, RoomType
from property_api.repositories.rooms import RoomRepository, RoomTypeRepository
from property_api.schemas.rooms import (
    RoomCreate,
    RoomTypeCreate,
    RoomTypeUpdate,
    RoomUpdate,
)
from property_api.services.base import BaseService

logger = logging.getLogger(__name__)

ROOM_NULLABLE = ("floor", "area", "description")


class RoomTypeService(BaseService):
    """Room type catalogue managed from the settings screen."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)
        self.repo = RoomTypeRepository(session)

    async def list_room_types(self, search: Optional[str] = None) -> List[RoomType]:
        return await self.repo.list_room_types(search=search)

    async def get_room_type(self, room_type_id: UUID) -> RoomType:
        room_type = await self.repo.get_by_id(room_type_id)
        if room_type is None:
            raise NotFoundError.for_entity("RoomType", room_type_id)
        return room_type

    async def create_room_type(self, payload: RoomTypeCreate) -> RoomType:
        return await self.repo.create(**self.values(payload))

    async def update_room_type(self, room_type_id: UUID, payload: RoomTypeUpdate) -> RoomType:
        room_type = await self.get_room_type(room_type_id)
        return await self.repo.update(room_type, self.changes(payload, nullable=("description",)))

    async def delete_room_type(self, room_type_id: UUID) -> None:
        room_type = await self.get_room_type(room_type_id)
        in_use = await self.repo.count_rooms(room_type_id)
        if in_use:
            raise BusinessRuleError(
                f"RoomType is used by {in_use} room(s) and cannot be deleted",
                details={"rooms": in_use},
            )
        await self.repo.delete(room_type)


class RoomService(BaseService):
    """Rooms: CRUD plus status changes."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)
        self.repo = RoomRepository(session)
        self.room_types = RoomTypeRepository(session)

    async def list_rooms(
        self,
        *,
        page: int,
        limit: int,
        search: Optional[str] = None,
        status: Optional[RoomStatus] = None,
        room_type_id: Optional[UUID] = None,
    ) -> Tuple[List[Room], bool]:
        return await self.repo.list_rooms(
            search=search,
            status=status.value if status else None,
            room_type_id=room_type_id,
            page=page,
            limit=limit,
        )

    async def get_room(self, room_id: UUID) -> Room:
        room = await self.repo.get_by_id(room_id)
        if room is None:
            raise NotFoundError.for_entity("Room", room_id)
        return room

    async def _require_room_type(self, room_type_id: UUID) -> None:
        if not await self.room_types.exists(room_type_id):
            raise NotFoundError.for_entity("RoomType", room_type_id)

    async def create_room(self, payload: RoomCreate) -> Room:
        await self._require_room_type(payload.room_type_id)
        return await self.repo.create(**self.values(payload))

    async def update_room(self, room_id: UUID, payload: RoomUpdate) -> Room:
        room = await self.get_room(room_id)
        values = self.changes(payload, nullable=ROOM_NULLABLE)
        if "room_type_id" in values:
            await self._require_room_type(values["room_type_id"])
        return await self.repo.update(room, values)

    async def update_status(self, room_id: UUID, status: RoomStatus) -> Room:
        room = await self.get_room(room_id)
        return await self.repo.update(room, {"status": status.value})

    async def delete_room(self, room_id: UUID) -> None:
        room = await self.get_room(room_id)
        contracts = await self.repo.count_contracts(room_id)
        if contracts:
            raise BusinessRuleError(
                f"Room has {contracts} contract(s) and cannot be deleted",
                details={"contracts": contracts},
            )
        await self.repo.delete(room)
        logger.info("Deleted room %s", room_id)
