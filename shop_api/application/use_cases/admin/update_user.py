# Standard library imports
import dataclasses
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ...dto.user_dto import AdminUserUpdateRequest, AdminUserUpdateResponse
from ...result import AccountErrorKind, UseCaseResult

logger = logging.getLogger(__name__)


class UpdateUserUseCase:
    """Use case for an admin editing another account"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(
        self,
        user_id: str,
        request: AdminUserUpdateRequest,
    ) -> UseCaseResult[AdminUserUpdateResponse]:
        """
        Update name/email when supplied and always overwrite the admin flag

        The password is never touched here. An omitted isAdmin arrives as
        False and demotes the account, as does an explicit null.

        Args:
            user_id: ID of the account to edit
            request: Optional name and email plus the admin flag

        Returns:
            Result carrying the updated account, NOT_FOUND or VALIDATION_FAILED
        """
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            return UseCaseResult.failure(AccountErrorKind.NOT_FOUND, "User not found")

        changes = {"is_admin": bool(request.is_admin)}
        if request.name is not None:
            changes["name"] = request.name
        if request.email is not None:
            changes["email"] = request.email

        try:
            updated = dataclasses.replace(user, **changes)
        except ValueError as exception:
            logger.info(f"Admin update for {user_id} rejected: {exception}")
            return UseCaseResult.failure(AccountErrorKind.VALIDATION_FAILED, "Invalid user data")

        try:
            saved_user = await self.user_repository.save(updated)
        except ValueError:
            return UseCaseResult.failure(AccountErrorKind.NOT_FOUND, "User not found")

        if saved_user.is_admin != user.is_admin:
            logger.info(f"User {saved_user.id} admin flag set to {saved_user.is_admin}")

        return UseCaseResult.success(AdminUserUpdateResponse(
            id=saved_user.id or "",
            name=saved_user.name,
            email=saved_user.email,
            is_admin=saved_user.is_admin,
        ))
