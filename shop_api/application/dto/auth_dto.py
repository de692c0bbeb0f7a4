from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class UserRegistrationRequest(BaseModel):
    """DTO for public registration request"""
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(min_length=1, max_length=200)
    email: EmailStr
    password: str = Field(min_length=1, max_length=256)
    # Accepted for wire compatibility; public registration never grants admin
    is_admin: Optional[bool] = Field(default=None, alias="isAdmin")


class UserLoginRequest(BaseModel):
    """DTO for user login request"""
    email: EmailStr
    password: str = Field(max_length=256)


class CallerContext(BaseModel):
    """Identity resolved from a verified bearer token"""
    user_id: str
    email: str
    is_admin: bool = False
