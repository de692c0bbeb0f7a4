"""
Shared pytest fixtures for shop backend tests.
"""
import dataclasses
import os
from typing import Dict, List, Optional
from unittest.mock import MagicMock, patch

import pytest
from bson import ObjectId

from shop_api.domain.models.user import User
from shop_api.domain.repositories.user_repository import UserRepository


class InMemoryUserRepository(UserRepository):
    """UserRepository fake keeping copies of users in insertion order."""

    def __init__(self) -> None:
        self.users: Dict[str, User] = {}

    async def find_by_email(self, email: str) -> Optional[User]:
        for user in self.users.values():
            if user.email == email:
                return dataclasses.replace(user)
        return None

    async def find_by_id(self, user_id: str) -> Optional[User]:
        user = self.users.get(user_id)
        return dataclasses.replace(user) if user else None

    async def find_all(self) -> List[User]:
        return [dataclasses.replace(user) for user in self.users.values()]

    async def save(self, user: User) -> User:
        if user.id is None:
            user = dataclasses.replace(user, id=str(ObjectId()))
        elif user.id not in self.users:
            raise ValueError(f"User with ID {user.id} not found")
        self.users[user.id] = dataclasses.replace(user)
        return dataclasses.replace(user)

    async def delete_by_id(self, user_id: str) -> bool:
        return self.users.pop(user_id, None) is not None


@pytest.fixture
def user_repo():
    """Empty in-memory user repository."""
    return InMemoryUserRepository()


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_shop_db",
        "JWT_SECRET_KEY": "test_secret_key_for_testing_only",
        "CATALOG_SERVICE_URL": "http://catalog.test",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.jwt_secret_key = "test_jwt_secret"
    mock.jwt_algorithm = "HS256"
    mock.access_token_expire_minutes = 60
    mock.bcrypt_rounds = 4
    mock.catalog_service_url = "http://catalog.test"
    mock.cors_origins = ["http://localhost:3000"]
    mock.log_level = "INFO"

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("shop_api.core.config.get_settings", return_value=mock), patch(
        "shop_api.core.security.get_settings", return_value=mock
    ), patch("shop_api.infrastructure.external.catalog_client.get_settings", return_value=mock):
        yield mock
