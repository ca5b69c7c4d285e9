from __future__ import annotations

import logging
from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from property_api.core.enums import UserRole, UserStatus
from property_api.core.exceptions import DuplicateError, NotFoundError
from property_api.core.security import get_password_hash, verify_password
from property_api.db.models.security import User
from property_api.repositories.security import UserRepository
from property_api.schemas.auth import UserCreate, UserUpdate
from property_api.services.base import BaseService

logger = logging.getLogger(__name__)


class UserService(BaseService):
    """Staff accounts and credential checks."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)
        self.repo = UserRepository(session)

    async def list_users(
        self,
        *,
        page: int,
        limit: int,
        search: Optional[str] = None,
        role: Optional[UserRole] = None,
        status: Optional[UserStatus] = None,
    ) -> Tuple[List[User], bool]:
        return await self.repo.list_users(
            search=search,
            role=role.value if role else None,
            status=status.value if status else None,
            page=page,
            limit=limit,
        )

    async def get_user(self, user_id: UUID) -> User:
        user = await self.repo.get_by_id(user_id)
        if user is None:
            raise NotFoundError.for_entity("User", user_id)
        return user

    async def _email_conflict(self, email: str) -> DuplicateError:
        # lost a race against another insert/update of the same email
        await self.session.rollback()
        return DuplicateError("Email already exists", details={"email": email})

    async def _require_free_email(self, email: str, exclude_id: Optional[UUID] = None) -> None:
        if await self.repo.email_taken(email, exclude_id=exclude_id):
            raise DuplicateError("Email already exists", details={"email": email})

    async def create_user(self, payload: UserCreate) -> User:
        await self._require_free_email(payload.email)
        values = self.values(payload, exclude=("password",))
        values["hashed_password"] = get_password_hash(payload.password)
        try:
            user = await self.repo.create(**values)
        except IntegrityError:
            raise await self._email_conflict(payload.email)
        logger.info("Created user %s (%s)", user.id, user.role)
        return user

    async def update_user(self, user_id: UUID, payload: UserUpdate) -> User:
        user = await self.get_user(user_id)
        values = self.changes(payload)
        if "email" in values:
            await self._require_free_email(values["email"], exclude_id=user_id)
        password = values.pop("password", None)
        if password:
            values["hashed_password"] = get_password_hash(password)
        email = values.get("email", user.email)
        try:
            return await self.repo.update(user, values)
        except IntegrityError:
            raise await self._email_conflict(email)

    async def update_status(self, user_id: UUID, status: UserStatus) -> User:
        user = await self.get_user(user_id)
        return await self.repo.update(user, {"status": status.value})

    async def delete_user(self, user_id: UUID) -> None:
        user = await self.get_user(user_id)
        await self.repo.delete(user)

    async def authenticate(self, email: str, password: str) -> Optional[User]:
        """Return the user for valid credentials, otherwise None. Status is not checked here."""
        user = await self.repo.get_user_by_email(email)
        if user is None or not verify_password(password, user.hashed_password):
            return None
        return user
