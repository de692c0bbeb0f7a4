# Standard library imports
import dataclasses
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....core.security import hash_password, issue_access_token
from ...dto.auth_dto import CallerContext
from ...dto.user_dto import AuthenticatedUserResponse, ProfileUpdateRequest
from ...result import AccountErrorKind, UseCaseResult

logger = logging.getLogger(__name__)


class UpdateProfileUseCase:
    """Use case for a caller editing their own name, email or password"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(
        self,
        caller: CallerContext,
        request: ProfileUpdateRequest,
    ) -> UseCaseResult[AuthenticatedUserResponse]:
        """
        Apply a partial update to the caller's account

        Fields are written when present (not None), so an explicit empty
        string is applied and then rejected by domain validation rather than
        silently ignored. A fresh token is issued even when nothing changed.

        Args:
            caller: Identity resolved from the bearer token
            request: Optional name, email and password

        Returns:
            Result carrying the updated profile and a new token
        """
        user = await self.user_repository.find_by_id(caller.user_id)
        if user is None:
            return UseCaseResult.failure(AccountErrorKind.UNAUTHORIZED, "User not found")

        changes = {}
        if request.name is not None:
            changes["name"] = request.name
        if request.email is not None:
            changes["email"] = request.email
        if request.password is not None:
            changes["hashed_password"] = hash_password(request.password)

        if changes:
            try:
                updated = dataclasses.replace(user, **changes)
            except ValueError as exception:
                logger.info(f"Profile update for {user.id} rejected: {exception}")
                return UseCaseResult.failure(AccountErrorKind.VALIDATION_FAILED, "Invalid user data")

            try:
                user = await self.user_repository.save(updated)
            except ValueError:
                return UseCaseResult.failure(AccountErrorKind.UNAUTHORIZED, "User not found")
            logger.info(f"User {user.id} updated fields: {', '.join(sorted(changes))}")

        token = issue_access_token(user.id)

        return UseCaseResult.success(AuthenticatedUserResponse(
            id=user.id or "",
            name=user.name,
            email=user.email,
            is_admin=user.is_admin,
            token=token,
        ))
