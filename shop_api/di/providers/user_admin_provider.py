from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...application.use_cases.admin.list_users import ListUsersUseCase
from ...application.use_cases.admin.get_user import GetUserUseCase
from ...application.use_cases.admin.update_user import UpdateUserUseCase
from ...application.use_cases.admin.delete_user import DeleteUserUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class UserAdminProvider:
    """Admin account-management use case provider"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            ListUsersUseCase,
            lambda: ListUsersUseCase(user_repository=container.get(UserRepository))
        )
        container.register_factory(
            GetUserUseCase,
            lambda: GetUserUseCase(user_repository=container.get(UserRepository))
        )
        container.register_factory(
            UpdateUserUseCase,
            lambda: UpdateUserUseCase(user_repository=container.get(UserRepository))
        )
        container.register_factory(
            DeleteUserUseCase,
            lambda: DeleteUserUseCase(user_repository=container.get(UserRepository))
        )
