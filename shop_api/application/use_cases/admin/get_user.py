# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ...dto.user_dto import UserResponse
from ...result import AccountErrorKind, UseCaseResult


class GetUserUseCase:
    """Use case for an admin reading any account by ID"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, user_id: str) -> UseCaseResult[UserResponse]:
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            return UseCaseResult.failure(AccountErrorKind.NOT_FOUND, "User not found")

        return UseCaseResult.success(UserResponse.from_domain(user))
