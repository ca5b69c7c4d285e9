from __future__ import annotations

from typing import List, Optional
from uuid import UUID

from pydantic import Field

from property_api.core.enums import RoomStatus
from property_api.schemas.common import CamelModel, IDModel, Timestamps


class RoomTypeRead(IDModel, Timestamps):
    """Room type read model."""
    name: str = Field(..., description="Room type name")
    description: Optional[str] = Field(None)


class RoomTypeCreate(CamelModel):
    """Create room type payload."""
    name: str = Field(..., min_length=1, description="Room type name")
    description: Optional[str] = Field(None)


class RoomTypeUpdate(CamelModel):
    """Update room type payload."""
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = Field(None)


class RoomSummary(IDModel):
    """Compact room reference embedded in other resources."""
    name: str
    status: RoomStatus


class RoomRead(IDModel, Timestamps):
    """Room read model."""
    name: str = Field(..., description="Room name or number")
    room_type_id: UUID = Field(..., description="Room type ID")
    room_type: Optional[RoomTypeRead] = Field(None, description="Room type")
    floor: Optional[int] = Field(None)
    area: Optional[float] = Field(None, description="Area in square meters")
    price: float = Field(..., description="Monthly price")
    status: RoomStatus = Field(..., description="Occupancy status")
    description: Optional[str] = Field(None)
    amenities: List[str] = Field(default_factory=list)
    images: List[str] = Field(default_factory=list)
    videos: List[str] = Field(default_factory=list)


class RoomCreate(CamelModel):
    """Create room payload."""
    name: str = Field(..., min_length=1)
    room_type_id: UUID = Field(..., description="Existing room type ID")
    price: float = Field(..., ge=0)
    status: RoomStatus = Field(RoomStatus.vacant)
    floor: Optional[int] = Field(None)
    area: Optional[float] = Field(None, ge=0)
    description: Optional[str] = Field(None)
    amenities: List[str] = Field(default_factory=list)
    images: List[str] = Field(default_factory=list)
    videos: List[str] = Field(default_factory=list)


class RoomUpdate(CamelModel):
    """Partial room update; only provided fields change."""
    name: Optional[str] = Field(None, min_length=1)
    room_type_id: Optional[UUID] = Field(None)
    price: Optional[float] = Field(None, ge=0)
    status: Optional[RoomStatus] = Field(None)
    floor: Optional[int] = Field(None)
    area: Optional[float] = Field(None, ge=0)
    description: Optional[str] = Field(None)
    amenities: Optional[List[str]] = Field(None)
    images: Optional[List[str]] = Field(None)
    videos: Optional[List[str]] = Field(None)


class RoomStatusUpdate(CamelModel):
    status: RoomStatus
