from abc import ABC, abstractmethod
from typing import List, Optional
from ..models.user import User


class UserRepository(ABC):
    """Repository interface - defines contract for user data access"""

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find user by email address"""
        pass

    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """Find user by ID (malformed IDs resolve to None)"""
        pass

    @abstractmethod
    async def find_all(self) -> List[User]:
        """Return every stored user, in store order"""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save user (create or update)"""
        pass

    @abstractmethod
    async def delete_by_id(self, user_id: str) -> bool:
        """Delete user permanently; False when nothing matched"""
        pass
