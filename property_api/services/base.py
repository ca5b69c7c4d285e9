from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Iterable

from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession


def _column_value(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


class BaseService:
    """
    Base class for services. Holds a session for use across multiple repositories.

    Services should keep business logic and orchestration, delegating data access
    to repositories.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @staticmethod
    def values(payload: BaseModel, *, exclude: Iterable[str] = ()) -> Dict[str, Any]:
        """All payload fields as column values (enums unwrapped)."""
        return {
            k: _column_value(v)
            for k, v in payload.model_dump(exclude=set(exclude)).items()
        }

    @staticmethod
    def changes(payload: BaseModel, *, nullable: Iterable[str] = ()) -> Dict[str, Any]:
        """
        Fields explicitly present in a partial-update payload, as column values.

        Explicit nulls are kept only for ``nullable`` columns; for the rest a
        null means "leave unchanged".
        """
        allowed_null = set(nullable)
        return {
            k: _column_value(v)
            for k, v in payload.model_dump(exclude_unset=True).items()
            if v is not None or k in allowed_null
        }
