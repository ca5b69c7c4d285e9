from __future__ import annotations

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from property_api.core.deps import PageParams, get_page_params
from property_api.core.enums import UserRole, UserStatus
from property_api.db.session import get_async_session
from property_api.schemas.auth import UserCreate, UserRead, UserStatusUpdate, UserUpdate
from property_api.schemas.common import MessageResponse, Page, build_page
from property_api.services.users import UserService

router = APIRouter(prefix="/users", tags=["Users"])


# PUBLIC_INTERFACE
@router.get(
    "",
    response_model=Page[UserRead],
    summary="List users",
    description="List staff accounts, newest first. Search matches name, email and phone.",
)
async def list_users(
    params: PageParams = Depends(get_page_params),
    search: Optional[str] = Query(None),
    role: Optional[UserRole] = Query(None),
    status_filter: Optional[UserStatus] = Query(None, alias="status"),
    session: AsyncSession = Depends(get_async_session),
) -> Page[UserRead]:
    rows, has_more = await UserService(session).list_users(
        page=params.page,
        limit=params.limit,
        search=search,
        role=role,
        status=status_filter,
    )
    return build_page(UserRead, rows, page=params.page, limit=params.limit, has_more=has_more)


# PUBLIC_INTERFACE
@router.post(
    "",
    response_model=UserRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create user",
    description="Create a staff account. Emails are unique (case-insensitive); the password is stored hashed.",
)
async def create_user(payload: UserCreate, session: AsyncSession = Depends(get_async_session)) -> UserRead:
    return UserRead.model_validate(await UserService(session).create_user(payload))


# PUBLIC_INTERFACE
@router.get("/{user_id}", response_model=UserRead, summary="Get user")
async def get_user(
    user_id: UUID = Path(..., description="User ID"),
    session: AsyncSession = Depends(get_async_session),
) -> UserRead:
    return UserRead.model_validate(await UserService(session).get_user(user_id))


# PUBLIC_INTERFACE
@router.patch(
    "/{user_id}",
    response_model=UserRead,
    summary="Update user",
    description="Update profile fields; a new password is re-hashed.",
)
@router.put(
    "/{user_id}",
    response_model=UserRead,
    summary="Update user (PUT)",
    description="Same partial update as PATCH, kept for clients that update users with PUT.",
)
async def update_user(
    payload: UserUpdate,
    user_id: UUID = Path(..., description="User ID"),
    session: AsyncSession = Depends(get_async_session),
) -> UserRead:
    return UserRead.model_validate(await UserService(session).update_user(user_id, payload))


# PUBLIC_INTERFACE
@router.patch("/{user_id}/status", response_model=UserRead, summary="Change user status")
async def update_user_status(
    payload: UserStatusUpdate,
    user_id: UUID = Path(..., description="User ID"),
    session: AsyncSession = Depends(get_async_session),
) -> UserRead:
    return UserRead.model_validate(await UserService(session).update_status(user_id, payload.status))


# PUBLIC_INTERFACE
@router.delete("/{user_id}", response_model=MessageResponse, summary="Delete user")
async def delete_user(
    user_id: UUID = Path(..., description="User ID"),
    session: AsyncSession = Depends(get_async_session),
) -> MessageResponse:
    await UserService(session).delete_user(user_id)
    return MessageResponse(message="User deleted successfully")
