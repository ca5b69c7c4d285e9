from __future__ import annotations

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from property_api.db.session import get_async_session
from property_api.schemas.common import MessageResponse
from property_api.schemas.rooms import RoomTypeCreate, RoomTypeRead, RoomTypeUpdate
from property_api.services.rooms import RoomTypeService

router = APIRouter(prefix="/settings/room-types", tags=["Room Types"])


# PUBLIC_INTERFACE
@router.get(
    "",
    response_model=List[RoomTypeRead],
    summary="List room types",
    description="Return every room type ordered by name. The catalogue is small, so the list is not paginated.",
)
async def list_room_types(
    search: Optional[str] = Query(None, description="Case-insensitive name substring"),
    session: AsyncSession = Depends(get_async_session),
) -> List[RoomTypeRead]:
    rows = await RoomTypeService(session).list_room_types(search=search)
    return [RoomTypeRead.model_validate(r) for r in rows]


# PUBLIC_INTERFACE
@router.get("/{room_type_id}", response_model=RoomTypeRead, summary="Get room type")
async def get_room_type(room_type_id: UUID, session: AsyncSession = Depends(get_async_session)) -> RoomTypeRead:
    return RoomTypeRead.model_validate(await RoomTypeService(session).get_room_type(room_type_id))


# PUBLIC_INTERFACE
@router.post("", response_model=RoomTypeRead, status_code=status.HTTP_201_CREATED, summary="Create room type")
async def create_room_type(
    payload: RoomTypeCreate,
    session: AsyncSession = Depends(get_async_session),
) -> RoomTypeRead:
    return RoomTypeRead.model_validate(await RoomTypeService(session).create_room_type(payload))


# PUBLIC_INTERFACE
@router.patch("/{room_type_id}", response_model=RoomTypeRead, summary="Update room type")
async def update_room_type(
    room_type_id: UUID,
    payload: RoomTypeUpdate,
    session: AsyncSession = Depends(get_async_session),
) -> RoomTypeRead:
    return RoomTypeRead.model_validate(await RoomTypeService(session).update_room_type(room_type_id, payload))


# PUBLIC_INTERFACE
@router.delete(
    "/{room_type_id}",
    response_model=MessageResponse,
    summary="Delete room type",
    description="Delete a room type that no room uses.",
)
async def delete_room_type(room_type_id: UUID, session: AsyncSession = Depends(get_async_session)) -> MessageResponse:
    await RoomTypeService(session).delete_room_type(room_type_id)
    return MessageResponse(message="RoomType deleted successfully")
