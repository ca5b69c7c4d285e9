from __future__ import annotations

from datetime import datetime
from typing import Any, Generic, List, Optional, TypeVar
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """
    Base schema for the public API: camelCase on the wire, snake_case in Python.

    Input accepts either spelling; ORM objects validate via from_attributes.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class IDModel(CamelModel):
    """Base schema exposing a UUID primary key."""
    id: UUID = Field(..., description="Unique identifier")


class Timestamps(CamelModel):
    """Common created/updated timestamp fields."""
    created_at: datetime = Field(..., description="Creation timestamp (UTC)")
    updated_at: datetime = Field(..., description="Last update timestamp (UTC)")


class PageMeta(CamelModel):
    """Pagination metadata for list endpoints."""
    page: int = Field(..., ge=1, description="Current page (1-based)")
    limit: int = Field(..., ge=1, description="Page size")
    has_more: bool = Field(..., description="True when a further page exists")


# PUBLIC_INTERFACE
class Page(CamelModel, Generic[T]):
    """Paginated list envelope: {data, meta: {page, limit, hasMore}}."""
    data: List[T] = Field(default_factory=list)
    meta: PageMeta


class MessageResponse(BaseModel):
    """Standard message response."""
    message: str = Field(..., description="Human readable message")


class ErrorInfo(BaseModel):
    """Structured error description."""
    type: str = Field(..., description="Machine-readable error type code")
    message: str = Field(..., description="Human-readable error message")
    details: Optional[Any] = Field(default=None, description="Optional error details (e.g., validation issues)")


# PUBLIC_INTERFACE
class ErrorResponse(CamelModel):
    """Standardized API error envelope returned by exception handlers."""
    status: int = Field(..., description="HTTP status code")
    error: ErrorInfo = Field(..., description="Error details")
    correlation_id: Optional[str] = Field(default=None, description="Request correlation ID")
    path: Optional[str] = Field(default=None, description="Request path")
    method: Optional[str] = Field(default=None, description="HTTP method")
    timestamp: datetime = Field(..., description="Error timestamp (UTC)")


# PUBLIC_INTERFACE
def build_page(schema: type[BaseModel], rows: List[Any], *, page: int, limit: int, has_more: bool) -> Page:
    """Validate ORM rows into ``schema`` and wrap them in the list envelope."""
    return Page[schema](  # type: ignore[valid-type]
        data=[schema.model_validate(r) for r in rows],
        meta=PageMeta(page=page, limit=limit, has_more=has_more),
    )
