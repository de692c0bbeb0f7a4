from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from ...domain.models.user import User


class UserResponse(BaseModel):
    """DTO for a stored user as seen by admins (no password)"""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    name: str
    email: str
    is_admin: bool = Field(alias="isAdmin")
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id or "",
            name=user.name,
            email=user.email,
            is_admin=user.is_admin,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class AdminUserUpdateResponse(BaseModel):
    """DTO returned after an admin edits an account"""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    name: str
    email: str
    is_admin: bool = Field(alias="isAdmin")


class AuthenticatedUserResponse(BaseModel):
    """DTO for login, registration and self-update: profile plus fresh token"""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    name: str
    email: str
    is_admin: bool = Field(alias="isAdmin")
    token: str


class ProfileResponse(BaseModel):
    """DTO for the caller's own profile; never carries a token"""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    email: str
    is_admin: bool = Field(alias="isAdmin")


class ProfileUpdateRequest(BaseModel):
    """Self-service partial update; only supplied (non-null) fields are written"""
    name: Optional[str] = Field(default=None, max_length=200)
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(default=None, min_length=1, max_length=256)


class AdminUserUpdateRequest(BaseModel):
    """Admin partial update; isAdmin is always written, omitted or null means false"""
    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = Field(default=None, max_length=200)
    email: Optional[EmailStr] = None
    is_admin: Optional[bool] = Field(default=None, alias="isAdmin")


class MessageResponse(BaseModel):
    message: str
