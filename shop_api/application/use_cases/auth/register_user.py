# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....core.security import hash_password, issue_access_token
from ...dto.auth_dto import UserRegistrationRequest
from ...dto.user_dto import AuthenticatedUserResponse
from ...result import AccountErrorKind, UseCaseResult

logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    """Use case for registering a new user"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, request: UserRegistrationRequest) -> UseCaseResult[AuthenticatedUserResponse]:
        """
        Register a new user

        The email check and the insert are separate round trips, so two
        concurrent registrations of one email can both succeed.

        Args:
            request: Registration request with user details

        Returns:
            Result carrying the new profile and a token, CONFLICT when the
            email is taken, VALIDATION_FAILED when the record is rejected
        """
        existing_user = await self.user_repository.find_by_email(request.email)
        if existing_user is not None:
            return UseCaseResult.failure(AccountErrorKind.CONFLICT, "User already exists")

        if request.is_admin:
            logger.warning(f"Ignoring isAdmin flag on public registration for {request.email}")

        try:
            new_user = User(
                id=None,  # Will be set by repository
                name=request.name,
                email=request.email,
                hashed_password=hash_password(request.password),
                is_admin=False,
            )
        except ValueError as exception:
            logger.info(f"Registration rejected: {exception}")
            return UseCaseResult.failure(AccountErrorKind.VALIDATION_FAILED, "Invalid user data")

        saved_user = await self.user_repository.save(new_user)

        token = issue_access_token(saved_user.id)

        logger.info(f"Registered user {saved_user.id}")
        return UseCaseResult.success(AuthenticatedUserResponse(
            id=saved_user.id or "",
            name=saved_user.name,
            email=saved_user.email,
            is_admin=saved_user.is_admin,
            token=token,
        ))
