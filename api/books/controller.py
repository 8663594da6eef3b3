"""
HTTP endpoints for books.
"""

from typing import List

import structlog
from fastapi import APIRouter, Depends

from api.books.service import BooksService
from api.dependencies import Pagination, get_books_service, get_pagination
from api.errors import ErrorType, error_responder
from api.models import BookCreateRequest, BookResponse

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/books", tags=["Books"])


@router.get("", response_model=List[BookResponse])
async def get_books(
    pagination: Pagination = Depends(get_pagination),
    service: BooksService = Depends(get_books_service)
):
    """
    Get a page of books.

    - **offset**: Number of books to skip (default 0)
    - **limit**: Maximum number of books to return (default 10)
    """
    return await service.get_books(pagination.offset, pagination.limit)


@router.post("", response_model=BookResponse)
async def create_book(
    payload: BookCreateRequest,
    service: BooksService = Depends(get_books_service)
):
    """Create a book."""
    if not payload.title:
        raise error_responder(ErrorType.VALIDATION_ERROR, "Title is required")

    book = await service.create(payload.title)
    logger.info("Book created", book_id=book.id)
    return book
