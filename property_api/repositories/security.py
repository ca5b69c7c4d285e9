from __future__ import annotations

from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy import func, or_, select

from property_api.db.models.security import User
from .base import LIKE_ESCAPE, BaseRepository, contains_pattern


class UserRepository(BaseRepository[User]):
    """Repository for back office user accounts."""

    model = User

    async def get_user_by_email(self, email: str) -> Optional[User]:
        stmt = select(User).where(func.lower(User.email) == email.lower())
        return await self.scalar_one_or_none(stmt)

    async def email_taken(self, email: str, *, exclude_id: Optional[UUID] = None) -> bool:
        stmt = select(User.id).where(func.lower(User.email) == email.lower())
        if exclude_id is not None:
            stmt = stmt.where(User.id != exclude_id)
        return (await self.scalar_one_or_none(stmt)) is not None

    async def list_users(
        self,
        *,
        search: Optional[str],
        role: Optional[str],
        status: Optional[str],
        page: int,
        limit: int,
    ) -> Tuple[List[User], bool]:
        stmt = select(User)
        if search:
            like = contains_pattern(search)
            stmt = stmt.where(
                or_(
                    User.name.ilike(like, escape=LIKE_ESCAPE),
                    User.email.ilike(like, escape=LIKE_ESCAPE),
                    User.phone.ilike(like, escape=LIKE_ESCAPE),
                )
            )
        if role:
            stmt = stmt.where(User.role == role)
        if status:
            stmt = stmt.where(User.status == status)
        stmt = stmt.order_by(User.created_at.desc(), User.id)
        return await self.paginate(stmt, page=page, limit=limit)
