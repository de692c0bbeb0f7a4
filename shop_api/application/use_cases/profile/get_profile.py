# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ...dto.auth_dto import CallerContext
from ...dto.user_dto import ProfileResponse
from ...result import AccountErrorKind, UseCaseResult


class GetProfileUseCase:
    """Use case for reading the caller's own profile"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, caller: CallerContext) -> UseCaseResult[ProfileResponse]:
        # The account may have been deleted after the token was issued
        user = await self.user_repository.find_by_id(caller.user_id)
        if user is None:
            return UseCaseResult.failure(AccountErrorKind.UNAUTHORIZED, "User not found")

        return UseCaseResult.success(ProfileResponse(
            id=user.id or "",
            name=user.name,
            email=user.email,
            is_admin=user.is_admin,
        ))
