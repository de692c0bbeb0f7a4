# Standard library imports
from typing import Optional

# External package imports
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

# Local application imports
from ...application.use_cases.auth.get_current_user import GetCurrentUserUseCase
from ...application.dto.auth_dto import CallerContext
from ...di.container import get_container
from .results import unwrap_result


security_scheme = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security_scheme),
) -> CallerContext:
    """
    FastAPI dependency resolving the caller from the bearer token

    Args:
        credentials: HTTP Bearer token credentials, if any

    Returns:
        CallerContext for the authenticated caller

    Raises:
        HTTPException: 401 if the token is missing, invalid, or its user is gone
    """
    if credentials is None or not credentials.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authorized, no token"
        )

    container = get_container()
    get_current_user_use_case = container.get(GetCurrentUserUseCase)

    result = await get_current_user_use_case.execute(credentials.credentials)
    return unwrap_result(result)


async def require_admin(
    current_user: CallerContext = Depends(get_current_user),
) -> CallerContext:
    """
    FastAPI dependency that only lets admin callers through

    Raises:
        HTTPException: 401 if the caller is not an admin
    """
    if not current_user.is_admin:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authorized as an admin"
        )
    return current_user
