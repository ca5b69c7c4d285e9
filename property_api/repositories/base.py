from __future__ import annotations

from typing import Any, Dict, Generic, List, Optional, Tuple, Type, TypeVar
from uuid import UUID

from sqlalchemy import Executable, Select, select
from sqlalchemy.ext.asyncio import AsyncSession

ModelT = TypeVar("ModelT")

LIKE_ESCAPE = "\\"


def contains_pattern(text: str) -> str:
    """Build an ILIKE pattern matching ``text`` literally anywhere in a column."""
    escaped = (
        text.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"


class BaseRepository(Generic[ModelT]):
    """
    Base class for repositories providing common helpers.

    Subclasses set ``model`` to their mapped class and add query builders for
    their own filters. Write helpers commit and refresh, so returned entities
    carry server-side state (timestamps, eager relationships).
    """

    model: Type[ModelT]

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def execute(self, statement: Executable, params: Optional[dict[str, Any]] = None):
        """Execute a SQLAlchemy statement."""
        return await self.session.execute(statement, params or {})

    async def scalars(self, statement: Executable, params: Optional[dict[str, Any]] = None):
        """Execute and return scalars."""
        result = await self.execute(statement, params)
        return result.scalars()

    async def scalar_one_or_none(self, statement: Executable, params: Optional[dict[str, Any]] = None):
        """Execute and return a single scalar or None."""
        result = await self.execute(statement, params)
        return result.scalar_one_or_none()

    async def commit(self) -> None:
        """Commit current transaction."""
        await self.session.commit()

    async def add(self, entity: Any) -> None:
        """Add a single entity to session."""
        self.session.add(entity)

    # Generic CRUD

    async def get_by_id(self, entity_id: UUID) -> Optional[ModelT]:
        stmt = select(self.model).where(self.model.id == entity_id)
        return await self.scalar_one_or_none(stmt)

    async def exists(self, entity_id: UUID) -> bool:
        stmt = select(self.model.id).where(self.model.id == entity_id)
        return (await self.scalar_one_or_none(stmt)) is not None

    async def paginate(self, stmt: Select, *, page: int, limit: int) -> Tuple[List[ModelT], bool]:
        """
        Apply page/limit to ``stmt`` and report whether a further page exists.

        One extra row is fetched instead of running a separate COUNT query.
        """
        offset = (page - 1) * limit
        rows = list(await self.scalars(stmt.offset(offset).limit(limit + 1)))
        return rows[:limit], len(rows) > limit

    async def create(self, **values: Any) -> ModelT:
        entity = self.model(**values)
        await self.add(entity)
        await self.commit()
        await self.session.refresh(entity)
        return entity

    async def update(self, entity: ModelT, values: Dict[str, Any]) -> ModelT:
        """Apply a partial update; keys absent from ``values`` are left untouched."""
        for key, value in values.items():
            setattr(entity, key, value)
        await self.commit()
        await self.session.refresh(entity)
        return entity

    async def delete(self, entity: ModelT) -> None:
        await self.session.delete(entity)
        await self.commit()
