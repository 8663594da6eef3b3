"""
Business rules for user accounts.
"""

from typing import List, Optional

from api.models import UserRecord
from api.users.repository import UsersRepository


class UsersService:
    """
    Orchestrates user operations on top of the repository.

    Email uniqueness is checked here, before writes, and not by the store.
    The check and the write are separate round trips, so two concurrent
    registrations with the same email can both pass.
    """

    def __init__(self, repository: UsersRepository):
        self.repository = repository

    async def get_users(self, offset: int, limit: int) -> List[UserRecord]:
        return await self.repository.get_users(offset, limit)

    async def get_user(self, user_id: str) -> Optional[UserRecord]:
        return await self.repository.get_user(user_id)

    async def get_user_by_email(self, email: str) -> Optional[UserRecord]:
        return await self.repository.get_user_by_email(email)

    async def email_exists(self, email: str) -> bool:
        """True if some user is already registered with this email."""
        return await self.repository.get_user_by_email(email) is not None

    async def create_user(self, email: str, hashed_password: str, full_name: str) -> bool:
        return await self.repository.create_user(email, hashed_password, full_name)

    async def update_user(self, user_id: str, email: str, full_name: str) -> bool:
        return await self.repository.update_user(user_id, email, full_name)

    async def delete_user(self, user_id: str) -> bool:
        return await self.repository.delete_user(user_id)
