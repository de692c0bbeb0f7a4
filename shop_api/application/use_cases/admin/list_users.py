# Standard library imports
import logging
from typing import List

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ...dto.auth_dto import CallerContext
from ...dto.user_dto import UserResponse
from ...result import UseCaseResult

logger = logging.getLogger(__name__)


class ListUsersUseCase:
    """Use case for listing every account (admin only, gated by the caller's route)"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, caller: CallerContext) -> UseCaseResult[List[UserResponse]]:
        """
        List all users with the password hash projected away

        Args:
            caller: Admin identity that requested the listing

        Returns:
            Result carrying every stored user in store order
        """
        users = await self.user_repository.find_all()
        logger.debug(f"Admin {caller.user_id} listed {len(users)} users")
        return UseCaseResult.success([UserResponse.from_domain(user) for user in users])
