# Standard library imports
from typing import List

# External package imports
from fastapi import APIRouter, Depends, status

# Local application imports
from ...application.dto.auth_dto import UserRegistrationRequest, UserLoginRequest, CallerContext
from ...application.dto.user_dto import (
    AdminUserUpdateRequest,
    AdminUserUpdateResponse,
    AuthenticatedUserResponse,
    MessageResponse,
    ProfileResponse,
    ProfileUpdateRequest,
    UserResponse,
)
from ...application.use_cases.auth.register_user import RegisterUserUseCase
from ...application.use_cases.auth.login_user import LoginUserUseCase
from ...application.use_cases.profile.get_profile import GetProfileUseCase
from ...application.use_cases.profile.update_profile import UpdateProfileUseCase
from ...application.use_cases.admin.list_users import ListUsersUseCase
from ...application.use_cases.admin.get_user import GetUserUseCase
from ...application.use_cases.admin.update_user import UpdateUserUseCase
from ...application.use_cases.admin.delete_user import DeleteUserUseCase
from ...di.container import get_container
from .dependencies import get_current_user, require_admin
from .results import unwrap_result


router = APIRouter(tags=["users"])


@router.post("/login", response_model=AuthenticatedUserResponse)
async def login_user(request: UserLoginRequest) -> AuthenticatedUserResponse:
    """
    Authenticate user and get access token

    Access: Public
    """
    login_use_case = get_container().get(LoginUserUseCase)
    return unwrap_result(await login_use_case.execute(request))


@router.post("", response_model=AuthenticatedUserResponse, status_code=status.HTTP_201_CREATED)
async def register_user(request: UserRegistrationRequest) -> AuthenticatedUserResponse:
    """
    Register a new user

    Access: Public
    """
    register_use_case = get_container().get(RegisterUserUseCase)
    return unwrap_result(await register_use_case.execute(request))


@router.get("/profile", response_model=ProfileResponse)
async def get_profile(
    current_user: CallerContext = Depends(get_current_user),
) -> ProfileResponse:
    """
    Get the caller's own profile

    Access: Private
    """
    get_profile_use_case = get_container().get(GetProfileUseCase)
    return unwrap_result(await get_profile_use_case.execute(current_user))


@router.put("/profile", response_model=AuthenticatedUserResponse)
async def update_profile(
    request: ProfileUpdateRequest,
    current_user: CallerContext = Depends(get_current_user),
) -> AuthenticatedUserResponse:
    """
    Update the caller's own name, email or password

    Access: Private
    """
    update_profile_use_case = get_container().get(UpdateProfileUseCase)
    return unwrap_result(await update_profile_use_case.execute(current_user, request))


@router.get("", response_model=List[UserResponse])
async def list_users(
    current_user: CallerContext = Depends(require_admin),
) -> List[UserResponse]:
    """
    List all users

    Access: Private/Admin
    """
    list_users_use_case = get_container().get(ListUsersUseCase)
    return unwrap_result(await list_users_use_case.execute(current_user))


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: str,
    current_user: CallerContext = Depends(require_admin),
) -> UserResponse:
    """
    Get a user by ID, without the password

    Access: Private/Admin
    """
    get_user_use_case = get_container().get(GetUserUseCase)
    return unwrap_result(await get_user_use_case.execute(user_id))


@router.put("/{user_id}", response_model=AdminUserUpdateResponse)
async def update_user(
    user_id: str,
    request: AdminUserUpdateRequest,
    current_user: CallerContext = Depends(require_admin),
) -> AdminUserUpdateResponse:
    """
    Update a user's name, email and admin flag

    Access: Private/Admin
    """
    update_user_use_case = get_container().get(UpdateUserUseCase)
    return unwrap_result(await update_user_use_case.execute(user_id, request))


@router.delete("/{user_id}", response_model=MessageResponse)
async def delete_user(
    user_id: str,
    current_user: CallerContext = Depends(require_admin),
) -> MessageResponse:
    """
    Delete a user permanently

    Access: Private/Admin
    """
    delete_user_use_case = get_container().get(DeleteUserUseCase)
    return unwrap_result(await delete_user_use_case.execute(user_id))
