from .auth_dto import UserRegistrationRequest, UserLoginRequest, CallerContext
from .user_dto import (
    UserResponse,
    AdminUserUpdateResponse,
    AuthenticatedUserResponse,
    ProfileResponse,
    ProfileUpdateRequest,
    AdminUserUpdateRequest,
    MessageResponse,
)

__all__ = [
    "UserRegistrationRequest",
    "UserLoginRequest",
    "CallerContext",
    "UserResponse",
    "AdminUserUpdateResponse",
    "AuthenticatedUserResponse",
    "ProfileResponse",
    "ProfileUpdateRequest",
    "AdminUserUpdateRequest",
    "MessageResponse",
]
