"""
FastAPI dependencies: store handle, services and pagination.
"""

from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, Request

from api.books.repository import BooksRepository
from api.books.service import BooksService
from api.config import config
from api.database import MongoDBManager
from api.errors import ErrorType, error_responder
from api.users.repository import UsersRepository
from api.users.service import UsersService


def get_mongo(request: Request) -> MongoDBManager:
    """Return the store handle opened by the application lifespan."""
    mongo = getattr(request.app.state, "mongo", None)
    if mongo is None or mongo.database is None:
        raise error_responder(ErrorType.SERVER_ERROR, "Database service not available")
    return mongo


def get_users_service(mongo: MongoDBManager = Depends(get_mongo)) -> UsersService:
    return UsersService(UsersRepository(mongo.users))


def get_books_service(mongo: MongoDBManager = Depends(get_mongo)) -> BooksService:
    return BooksService(BooksRepository(mongo.books))


def _parse_positive(value: Optional[str], default: int) -> int:
    """Parse a query value; missing, malformed, zero or negative means default."""
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        return default
    return parsed if parsed > 0 else default


@dataclass
class Pagination:
    """Offset/limit window over a collection."""
    offset: int = 0
    limit: int = 10


def get_pagination(offset: Optional[str] = None, limit: Optional[str] = None) -> Pagination:
    """
    Read ``offset`` and ``limit`` from the query string.

    Values are accepted as raw strings so that bad input falls back to the
    defaults instead of failing the request.
    """
    return Pagination(
        offset=_parse_positive(offset, 0),
        limit=min(_parse_positive(limit, config.default_page_limit), config.max_page_limit)
    )
