# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ...dto.user_dto import MessageResponse
from ...result import AccountErrorKind, UseCaseResult

logger = logging.getLogger(__name__)


class DeleteUserUseCase:
    """Use case for an admin permanently removing an account"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, user_id: str) -> UseCaseResult[MessageResponse]:
        deleted = await self.user_repository.delete_by_id(user_id)
        if not deleted:
            return UseCaseResult.failure(AccountErrorKind.NOT_FOUND, "User not found")

        logger.info(f"Deleted user {user_id}")
        return UseCaseResult.success(MessageResponse(message="User removed"))
