# Standard library imports
from datetime import datetime, timezone
from typing import List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.constants import UserFields
from .mongo_connection import get_user_collection


def _to_object_id(user_id: str) -> Optional[ObjectId]:
    try:
        return ObjectId(user_id)
    except (InvalidId, ValueError, TypeError):
        return None


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""

    def __init__(self, user_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.user_collection = user_collection if user_collection is not None else get_user_collection()

    async def find_by_email(self, email: str) -> Optional[User]:
        """
        Find user by email address

        Args:
            email: Email address to search for

        Returns:
            User domain model if found, None otherwise
        """
        if not email:
            return None

        try:
            document = await self.user_collection.find_one({UserFields.EMAIL: email})
            if document is None:
                return None
            return self._document_to_user(document)
        except Exception as e:
            raise RuntimeError(f"Error finding user by email: {str(e)}")

    async def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Find user by ID

        Args:
            user_id: User ID to search for

        Returns:
            User domain model if found, None otherwise (also for malformed IDs)
        """
        if not user_id:
            return None

        object_id = _to_object_id(user_id)
        if object_id is None:
            return None

        try:
            document = await self.user_collection.find_one({UserFields.MONGO_ID: object_id})
            if document is None:
                return None
            return self._document_to_user(document)
        except Exception as e:
            raise RuntimeError(f"Error finding user by ID: {str(e)}")

    async def find_all(self) -> List[User]:
        """Return every user document in natural store order."""
        try:
            documents = await self.user_collection.find({}).to_list(length=None)
            return [self._document_to_user(document) for document in documents]
        except Exception as e:
            raise RuntimeError(f"Error listing users: {str(e)}")

    async def save(self, user: User) -> User:
        """
        Save user (create new or update existing)

        Args:
            user: User domain model to save

        Returns:
            Saved User domain model with ID set

        Raises:
            ValueError: If an update targets an unknown or malformed ID
        """
        if not user:
            raise ValueError("User cannot be None")

        now = datetime.now(timezone.utc)
        user_dict = self._user_to_dict(user)
        user_dict[UserFields.UPDATED_AT] = now

        if user.id:
            object_id = _to_object_id(user.id)
            if object_id is None:
                raise ValueError(f"Invalid user ID format: {user.id}")
            try:
                update_result = await self.user_collection.update_one(
                    {UserFields.MONGO_ID: object_id},
                    {"$set": user_dict}
                )
                if update_result.matched_count == 0:
                    raise ValueError(f"User with ID {user.id} not found")

                updated_document = await self.user_collection.find_one({UserFields.MONGO_ID: object_id})
            except ValueError:
                raise
            except Exception as e:
                raise RuntimeError(f"Error updating user: {str(e)}")

            if updated_document is None:
                raise RuntimeError(f"User {user.id} was updated but could not be retrieved")
            return self._document_to_user(updated_document)

        user_dict[UserFields.CREATED_AT] = now
        try:
            result = await self.user_collection.insert_one(user_dict)
            new_document = await self.user_collection.find_one({UserFields.MONGO_ID: result.inserted_id})
        except Exception as e:
            raise RuntimeError(f"Error saving user: {str(e)}")

        if new_document is None:
            raise RuntimeError("User was created but could not be retrieved")
        return self._document_to_user(new_document)

    async def delete_by_id(self, user_id: str) -> bool:
        """
        Remove a user document permanently

        Args:
            user_id: User ID to delete

        Returns:
            True if a document was removed, False otherwise
        """
        object_id = _to_object_id(user_id) if user_id else None
        if object_id is None:
            return False

        try:
            result = await self.user_collection.delete_one({UserFields.MONGO_ID: object_id})
        except Exception as e:
            raise RuntimeError(f"Error deleting user: {str(e)}")
        return result.deleted_count > 0

    def _document_to_user(self, document: dict) -> User:
        """
        Convert MongoDB document to User domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            User domain model
        """
        if not document or UserFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")

        return User(
            id=str(document[UserFields.MONGO_ID]),
            name=document.get(UserFields.NAME, ""),
            email=document.get(UserFields.EMAIL, ""),
            hashed_password=document.get(UserFields.PASSWORD, ""),
            is_admin=bool(document.get(UserFields.IS_ADMIN, False)),
            created_at=document.get(UserFields.CREATED_AT),
            updated_at=document.get(UserFields.UPDATED_AT),
        )

    def _user_to_dict(self, user: User) -> dict:
        """
        Convert User domain model to the writable part of a MongoDB document

        Timestamps and _id are managed by save().
        """
        return {
            UserFields.NAME: user.name,
            UserFields.EMAIL: user.email,
            UserFields.PASSWORD: user.hashed_password,
            UserFields.IS_ADMIN: user.is_admin,
        }
