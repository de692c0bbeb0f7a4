# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....core.security import verify_password, issue_access_token
from ...dto.auth_dto import UserLoginRequest
from ...dto.user_dto import AuthenticatedUserResponse
from ...result import AccountErrorKind, UseCaseResult

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"


class LoginUserUseCase:
    """Use case for authenticating a user and generating JWT token"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, request: UserLoginRequest) -> UseCaseResult[AuthenticatedUserResponse]:
        """
        Authenticate user and generate access token

        Unknown email and wrong password produce the same UNAUTHORIZED error.

        Args:
            request: Login request with email and password

        Returns:
            Result carrying the profile plus a new token on success
        """
        user = await self.user_repository.find_by_email(request.email)
        if user is None or not verify_password(request.password, user.hashed_password):
            logger.info("Rejected login attempt")
            return UseCaseResult.failure(AccountErrorKind.UNAUTHORIZED, INVALID_CREDENTIALS)

        token = issue_access_token(user.id)

        logger.info(f"User {user.id} logged in")
        return UseCaseResult.success(AuthenticatedUserResponse(
            id=user.id or "",
            name=user.name,
            email=user.email,
            is_admin=user.is_admin,
            token=token,
        ))
