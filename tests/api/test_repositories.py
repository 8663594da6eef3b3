"""
Tests for the MongoDB repositories against a mocked Motor collection.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from bson import ObjectId
from pymongo.errors import ServerSelectionTimeoutError

from api.books.repository import BooksRepository
from api.users.repository import UsersRepository

USER_ID = ObjectId()


@pytest.fixture
def user_doc():
    return {
        "_id": USER_ID,
        "email": "ada@example.com",
        "full_name": "Ada Lovelace",
        "password": "$pbkdf2-sha256$29000$salt$digest"
    }


@pytest.fixture
def collection():
    """Create a mock Motor collection."""
    collection = MagicMock()
    collection.find_one = AsyncMock(return_value=None)
    collection.insert_one = AsyncMock()
    collection.update_one = AsyncMock()
    collection.delete_one = AsyncMock()
    return collection


def mock_cursor(collection, docs):
    cursor = MagicMock()
    cursor.skip.return_value = cursor
    cursor.limit.return_value = cursor
    cursor.to_list = AsyncMock(return_value=docs)
    collection.find.return_value = cursor
    return cursor


class TestUsersRepository:
    """Test cases for UsersRepository."""

    @pytest.mark.asyncio
    async def test_get_users(self, collection, user_doc):
        cursor = mock_cursor(collection, [user_doc])
        repository = UsersRepository(collection)

        users = await repository.get_users(5, 10)

        collection.find.assert_called_once_with({})
        cursor.skip.assert_called_once_with(5)
        cursor.limit.assert_called_once_with(10)
        assert users[0].id == str(USER_ID)
        assert users[0].email == "ada@example.com"

    @pytest.mark.asyncio
    async def test_get_user(self, collection, user_doc):
        collection.find_one.return_value = user_doc
        repository = UsersRepository(collection)

        user = await repository.get_user(str(USER_ID))

        collection.find_one.assert_awaited_once_with({"_id": USER_ID})
        assert user.full_name == "Ada Lovelace"

    @pytest.mark.asyncio
    async def test_get_user_with_malformed_id(self, collection):
        repository = UsersRepository(collection)

        assert await repository.get_user("not-an-object-id") is None
        collection.find_one.assert_not_called()

    @pytest.mark.asyncio
    async def test_get_user_by_email(self, collection, user_doc):
        collection.find_one.return_value = user_doc
        repository = UsersRepository(collection)

        user = await repository.get_user_by_email("ada@example.com")

        collection.find_one.assert_awaited_once_with({"email": "ada@example.com"})
        assert user.id == str(USER_ID)

    @pytest.mark.asyncio
    async def test_create_user(self, collection):
        collection.insert_one.return_value = MagicMock(acknowledged=True, inserted_id=USER_ID)
        repository = UsersRepository(collection)

        assert await repository.create_user("ada@example.com", "hash", "Ada Lovelace") is True
        collection.insert_one.assert_awaited_once_with({
            "email": "ada@example.com",
            "full_name": "Ada Lovelace",
            "password": "hash"
        })

    @pytest.mark.asyncio
    async def test_update_user(self, collection):
        collection.update_one.return_value = MagicMock(matched_count=1)
        repository = UsersRepository(collection)

        assert await repository.update_user(str(USER_ID), "new@example.com", "Ada") is True
        collection.update_one.assert_awaited_once_with(
            {"_id": USER_ID},
            {"$set": {"email": "new@example.com", "full_name": "Ada"}}
        )

    @pytest.mark.asyncio
    async def test_update_missing_user(self, collection):
        collection.update_one.return_value = MagicMock(matched_count=0)
        repository = UsersRepository(collection)

        assert await repository.update_user(str(USER_ID), "new@example.com", "Ada") is False

    @pytest.mark.asyncio
    async def test_delete_user(self, collection):
        collection.delete_one.return_value = MagicMock(deleted_count=1)
        repository = UsersRepository(collection)

        assert await repository.delete_user(str(USER_ID)) is True
        assert await repository.delete_user("bogus") is False
        collection.delete_one.assert_awaited_once_with({"_id": USER_ID})

    @pytest.mark.asyncio
    async def test_storage_errors_propagate(self, collection):
        """Test that driver errors are re-raised unchanged, without retries."""
        error = ServerSelectionTimeoutError("no servers")
        collection.find_one.side_effect = error
        repository = UsersRepository(collection)

        with pytest.raises(ServerSelectionTimeoutError) as exc_info:
            await repository.get_user_by_email("ada@example.com")

        assert exc_info.value is error
        assert collection.find_one.await_count == 1


class TestBooksRepository:
    """Test cases for BooksRepository."""

    @pytest.mark.asyncio
    async def test_get_books(self, collection):
        book_id = ObjectId()
        cursor = mock_cursor(collection, [{"_id": book_id, "title": "Dune"}])
        repository = BooksRepository(collection)

        books = await repository.get_books(0, 10)

        cursor.skip.assert_called_once_with(0)
        cursor.limit.assert_called_once_with(10)
        assert books[0].model_dump() == {"id": str(book_id), "title": "Dune"}

    @pytest.mark.asyncio
    async def test_create(self, collection):
        book_id = ObjectId()
        collection.insert_one.return_value = MagicMock(inserted_id=book_id)
        repository = BooksRepository(collection)

        book = await repository.create("Dune")

        collection.insert_one.assert_awaited_once_with({"title": "Dune"})
        assert book.id == str(book_id)
