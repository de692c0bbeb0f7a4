from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...application.use_cases.auth.register_user import RegisterUserUseCase
from ...application.use_cases.auth.login_user import LoginUserUseCase
from ...application.use_cases.auth.get_current_user import GetCurrentUserUseCase
from ...application.use_cases.profile.get_profile import GetProfileUseCase
from ...application.use_cases.profile.update_profile import UpdateProfileUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class AuthProvider:
    """Authentication use case provider - login, registration and self-service profile"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all authentication use cases.
        Use cases are created on-demand via factories.
        """
        for use_case in (
            RegisterUserUseCase,
            LoginUserUseCase,
            GetCurrentUserUseCase,
            GetProfileUseCase,
            UpdateProfileUseCase,
        ):
            container.register_factory(
                use_case,
                lambda use_case=use_case: use_case(
                    user_repository=container.get(UserRepository)
                )
            )
