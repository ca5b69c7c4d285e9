from __future__ import annotations

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from property_api.core.deps import PageParams, get_page_params
from property_api.core.enums import RoomStatus
from property_api.db.session import get_async_session
from property_api.schemas.common import MessageResponse, Page, build_page
from property_api.schemas.rooms import RoomCreate, RoomRead, RoomStatusUpdate, RoomUpdate
from property_api.services.rooms import RoomService

router = APIRouter(prefix="/rooms", tags=["Rooms"])


# PUBLIC_INTERFACE
@router.get(
    "",
    response_model=Page[RoomRead],
    summary="List rooms",
    description="List rooms ordered by name. Search matches name and description.",
)
async def list_rooms(
    params: PageParams = Depends(get_page_params),
    search: Optional[str] = Query(None, description="Case-insensitive substring"),
    status_filter: Optional[RoomStatus] = Query(None, alias="status", description="Filter by status"),
    room_type_id: Optional[UUID] = Query(None, alias="roomTypeId", description="Filter by room type"),
    session: AsyncSession = Depends(get_async_session),
) -> Page[RoomRead]:
    rows, has_more = await RoomService(session).list_rooms(
        page=params.page,
        limit=params.limit,
        search=search,
        status=status_filter,
        room_type_id=room_type_id,
    )
    return build_page(RoomRead, rows, page=params.page, limit=params.limit, has_more=has_more)


# PUBLIC_INTERFACE
@router.get("/{room_id}", response_model=RoomRead, summary="Get room")
async def get_room(room_id: UUID, session: AsyncSession = Depends(get_async_session)) -> RoomRead:
    room = await RoomService(session).get_room(room_id)
    return RoomRead.model_validate(room)


# PUBLIC_INTERFACE
@router.post(
    "",
    response_model=RoomRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create room",
    description="Create a room. The room type must exist.",
)
async def create_room(payload: RoomCreate, session: AsyncSession = Depends(get_async_session)) -> RoomRead:
    room = await RoomService(session).create_room(payload)
    return RoomRead.model_validate(room)


# PUBLIC_INTERFACE
@router.patch("/{room_id}", response_model=RoomRead, summary="Update room")
async def update_room(
    room_id: UUID,
    payload: RoomUpdate,
    session: AsyncSession = Depends(get_async_session),
) -> RoomRead:
    room = await RoomService(session).update_room(room_id, payload)
    return RoomRead.model_validate(room)


# PUBLIC_INTERFACE
@router.patch("/{room_id}/status", response_model=RoomRead, summary="Change room status")
async def update_room_status(
    room_id: UUID,
    payload: RoomStatusUpdate,
    session: AsyncSession = Depends(get_async_session),
) -> RoomRead:
    room = await RoomService(session).update_status(room_id, payload.status)
    return RoomRead.model_validate(room)


# PUBLIC_INTERFACE
@router.delete(
    "/{room_id}",
    response_model=MessageResponse,
    summary="Delete room",
    description="Delete a room. Rooms referenced by a contract cannot be deleted.",
)
async def delete_room(room_id: UUID, session: AsyncSession = Depends(get_async_session)) -> MessageResponse:
    await RoomService(session).delete_room(room_id)
    return MessageResponse(message="Room deleted successfully")
