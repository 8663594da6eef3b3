"""
Business rules for books. None beyond the repository yet.
"""

from typing import List

from api.books.repository import BooksRepository
from api.models import BookResponse


class BooksService:

    def __init__(self, repository: BooksRepository):
        self.repository = repository

    async def get_books(self, offset: int, limit: int) -> List[BookResponse]:
        return await self.repository.get_books(offset, limit)

    async def create(self, title: str) -> BookResponse:
        return await self.repository.create(title)
