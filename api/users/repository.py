"""
Storage access for user documents.
"""

from typing import List, Optional

import structlog
from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorCollection

from api.models import UserRecord

logger = structlog.get_logger(__name__)


def _to_object_id(user_id: str) -> Optional[ObjectId]:
    """Parse a user id; ids that are not ObjectIds match no document."""
    if not ObjectId.is_valid(user_id):
        return None
    return ObjectId(user_id)


def _to_record(user_doc: dict) -> UserRecord:
    return UserRecord(
        id=str(user_doc["_id"]),
        email=user_doc["email"],
        full_name=user_doc["full_name"],
        password=user_doc["password"]
    )


class UsersRepository:
    """CRUD operations on the users collection."""

    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    async def get_users(self, offset: int, limit: int) -> List[UserRecord]:
        """
        Get a page of users in storage order.

        Args:
            offset: Number of users to skip
            limit: Maximum number of users to return

        Returns:
            List of user records
        """
        try:
            cursor = self.collection.find({}).skip(offset).limit(limit)
            user_docs = await cursor.to_list(length=limit)
            return [_to_record(user_doc) for user_doc in user_docs]
        except Exception as e:
            logger.error("Failed to get users", offset=offset, limit=limit, error=str(e))
            raise

    async def get_user(self, user_id: str) -> Optional[UserRecord]:
        """
        Get a single user by ID.

        Args:
            user_id: User identifier

        Returns:
            UserRecord if found, None otherwise
        """
        object_id = _to_object_id(user_id)
        if object_id is None:
            return None

        try:
            user_doc = await self.collection.find_one({"_id": object_id})
        except Exception as e:
            logger.error("Failed to get user", user_id=user_id, error=str(e))
            raise

        return _to_record(user_doc) if user_doc else None

    async def get_user_by_email(self, email: str) -> Optional[UserRecord]:
        """
        Get a single user by email address.

        Args:
            email: Email address, matched exactly

        Returns:
            UserRecord if found, None otherwise
        """
        try:
            user_doc = await self.collection.find_one({"email": email})
        except Exception as e:
            logger.error("Failed to get user by email", email=email, error=str(e))
            raise

        return _to_record(user_doc) if user_doc else None

    async def create_user(self, email: str, hashed_password: str, full_name: str) -> bool:
        """
        Insert a new user.

        Args:
            email: Email address
            hashed_password: Salted password hash
            full_name: Full name

        Returns:
            True if the insert was acknowledged
        """
        try:
            result = await self.collection.insert_one({
                "email": email,
                "full_name": full_name,
                "password": hashed_password
            })
        except Exception as e:
            logger.error("Failed to create user", email=email, error=str(e))
            raise

        logger.debug("Inserted user", user_id=str(result.inserted_id), email=email)
        return bool(result.acknowledged)

    async def update_user(self, user_id: str, email: str, full_name: str) -> bool:
        """
        Update the email and full name of a user.

        Returns:
            True if a user with that ID exists
        """
        object_id = _to_object_id(user_id)
        if object_id is None:
            return False

        try:
            result = await self.collection.update_one(
                {"_id": object_id},
                {"$set": {"email": email, "full_name": full_name}}
            )
        except Exception as e:
            logger.error("Failed to update user", user_id=user_id, error=str(e))
            raise

        return result.matched_count > 0

    async def delete_user(self, user_id: str) -> bool:
        """
        Delete a user.

        Returns:
            True if a user was deleted
        """
        object_id = _to_object_id(user_id)
        if object_id is None:
            return False

        try:
            result = await self.collection.delete_one({"_id": object_id})
        except Exception as e:
            logger.error("Failed to delete user", user_id=user_id, error=str(e))
            raise

        return result.deleted_count > 0
