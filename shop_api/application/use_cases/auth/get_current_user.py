# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....core.security import InvalidAccessToken, read_token_subject
from ...dto.auth_dto import CallerContext
from ...result import AccountErrorKind, UseCaseResult

TOKEN_FAILED = "Not authorized, token failed"


class GetCurrentUserUseCase:
    """Use case for resolving the caller behind a JWT token"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, token: str) -> UseCaseResult[CallerContext]:
        """
        Resolve caller identity from JWT token

        A valid signature is not enough: the subject must still exist.

        Args:
            token: JWT access token

        Returns:
            Result carrying the CallerContext, or UNAUTHORIZED
        """
        try:
            user_id = read_token_subject(token)
        except InvalidAccessToken:
            return UseCaseResult.failure(AccountErrorKind.UNAUTHORIZED, TOKEN_FAILED)

        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            return UseCaseResult.failure(AccountErrorKind.UNAUTHORIZED, TOKEN_FAILED)

        return UseCaseResult.success(CallerContext(
            user_id=user.id or "",
            email=user.email,
            is_admin=user.is_admin,
        ))
