from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, EmailStr, Field

from property_api.core.enums import UserRole, UserStatus
from property_api.schemas.common import CamelModel, IDModel, Timestamps
from property_api.schemas.tenants import PHONE_PATTERN


class TokenPair(BaseModel):
    """Access and refresh tokens."""
    token_type: str = Field("bearer", description="Token type, typically 'bearer'")
    access_token: str = Field(..., description="JWT access token")
    refresh_token: str = Field(..., description="JWT refresh token")


class RefreshRequest(CamelModel):
    """Request to refresh an access token."""
    refresh_token: str = Field(..., description="Refresh token")


class UserRead(IDModel, Timestamps):
    """User read model. The password hash is never exposed."""
    name: str = Field(..., description="Full name")
    email: str = Field(..., description="User email")
    phone: str = Field(..., description="Phone number")
    role: UserRole = Field(..., description="Role")
    status: UserStatus = Field(..., description="Account status")


class UserCreate(CamelModel):
    """Admin create user payload."""
    name: str = Field(..., min_length=2, description="Full name")
    email: EmailStr = Field(..., description="Email")
    phone: str = Field(..., pattern=PHONE_PATTERN)
    role: UserRole = Field(..., description="Role")
    status: UserStatus = Field(default=UserStatus.active)
    password: str = Field(..., min_length=6, description="Password")


class UserUpdate(CamelModel):
    """Admin update user payload."""
    name: Optional[str] = Field(None, min_length=2)
    email: Optional[EmailStr] = Field(None)
    phone: Optional[str] = Field(None, pattern=PHONE_PATTERN)
    role: Optional[UserRole] = Field(None)
    status: Optional[UserStatus] = Field(None)
    password: Optional[str] = Field(None, min_length=6)


class UserStatusUpdate(CamelModel):
    status: UserStatus
