"""
Storage access for book documents.
"""

from typing import List

import structlog
from motor.motor_asyncio import AsyncIOMotorCollection

from api.models import BookResponse

logger = structlog.get_logger(__name__)


class BooksRepository:
    """Read and create operations on the books collection."""

    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    async def get_books(self, offset: int, limit: int) -> List[BookResponse]:
        """
        Get a page of books in storage order.

        Args:
            offset: Number of books to skip
            limit: Maximum number of books to return

        Returns:
            List of books
        """
        try:
            cursor = self.collection.find({}).skip(offset).limit(limit)
            book_docs = await cursor.to_list(length=limit)
        except Exception as e:
            logger.error("Failed to get books", offset=offset, limit=limit, error=str(e))
            raise

        return [BookResponse(id=str(book_doc["_id"]), title=book_doc["title"]) for book_doc in book_docs]

    async def create(self, title: str) -> BookResponse:
        """Insert a book and return it with its new ID."""
        try:
            result = await self.collection.insert_one({"title": title})
        except Exception as e:
            logger.error("Failed to create book", title=title, error=str(e))
            raise

        return BookResponse(id=str(result.inserted_id), title=title)
