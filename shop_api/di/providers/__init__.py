from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .auth_provider import AuthProvider
from .user_admin_provider import UserAdminProvider
from .catalog_provider import CatalogProvider


__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "AuthProvider",
    "UserAdminProvider",
    "CatalogProvider",
]
