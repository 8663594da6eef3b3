"""
Pytest configuration and shared fixtures.
"""

from typing import Dict, List, Optional

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from api.dependencies import get_books_service, get_users_service
from api.main import app
from api.models import BookResponse, UserRecord
from api.books.service import BooksService
from api.users.service import UsersService


class InMemoryUsersRepository:
    """Users repository double keeping documents in insertion order."""

    def __init__(self):
        self.users: Dict[str, UserRecord] = {}

    async def get_users(self, offset: int, limit: int) -> List[UserRecord]:
        return list(self.users.values())[offset:offset + limit]

    async def get_user(self, user_id: str) -> Optional[UserRecord]:
        return self.users.get(user_id)

    async def get_user_by_email(self, email: str) -> Optional[UserRecord]:
        for user in self.users.values():
            if user.email == email:
                return user
        return None

    async def create_user(self, email: str, hashed_password: str, full_name: str) -> bool:
        user_id = str(ObjectId())
        self.users[user_id] = UserRecord(
            id=user_id, email=email, full_name=full_name, password=hashed_password
        )
        return True

    async def update_user(self, user_id: str, email: str, full_name: str) -> bool:
        user = self.users.get(user_id)
        if user is None:
            return False
        self.users[user_id] = user.model_copy(update={"email": email, "full_name": full_name})
        return True

    async def delete_user(self, user_id: str) -> bool:
        return self.users.pop(user_id, None) is not None


class InMemoryBooksRepository:
    """Books repository double keeping documents in insertion order."""

    def __init__(self):
        self.books: List[BookResponse] = []

    async def get_books(self, offset: int, limit: int) -> List[BookResponse]:
        return self.books[offset:offset + limit]

    async def create(self, title: str) -> BookResponse:
        book = BookResponse(id=str(ObjectId()), title=title)
        self.books.append(book)
        return book


@pytest.fixture
def users_repository():
    """Create an empty in-memory users repository."""
    return InMemoryUsersRepository()


@pytest.fixture
def books_repository():
    """Create an empty in-memory books repository."""
    return InMemoryBooksRepository()


@pytest.fixture
def users_service(users_repository):
    return UsersService(users_repository)


@pytest.fixture
def client(users_repository, books_repository):
    """Create a test client wired to the in-memory repositories."""
    app.dependency_overrides[get_users_service] = lambda: UsersService(users_repository)
    app.dependency_overrides[get_books_service] = lambda: BooksService(books_repository)
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def registration():
    """A valid registration body."""
    return {
        "email": "ada@example.com",
        "password": "correct-horse",
        "full_name": "Ada Lovelace",
        "confirm_password": "correct-horse"
    }
