"""
MongoDB connection management for the API.
Owns the Motor client for the lifetime of the application.
"""

from typing import Dict, Optional

import structlog
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import ConnectionFailure

logger = structlog.get_logger(__name__)


class MongoDBManager:
    """
    Async MongoDB manager.
    Handles connection, indexing and health checks. Collections are read
    from it by the repositories.
    """

    def __init__(
        self,
        connection_url: str,
        database_name: str,
        users_collection: str = "users",
        books_collection: str = "books",
        timeout_ms: int = 5000
    ):
        """
        Initialize MongoDB manager.

        Args:
            connection_url: MongoDB connection URL
            database_name: Name of the database
            users_collection: Name of the users collection
            books_collection: Name of the books collection
            timeout_ms: Server selection timeout in milliseconds
        """
        self.connection_url = connection_url
        self.database_name = database_name
        self.users_collection_name = users_collection
        self.books_collection_name = books_collection
        self.timeout_ms = timeout_ms
        self.client: Optional[AsyncIOMotorClient] = None
        self.database: Optional[AsyncIOMotorDatabase] = None

    @property
    def users(self):
        return self.database[self.users_collection_name]

    @property
    def books(self):
        return self.database[self.books_collection_name]

    async def connect(self) -> None:
        """Establish connection to MongoDB."""
        try:
            self.client = AsyncIOMotorClient(
                self.connection_url,
                serverSelectionTimeoutMS=self.timeout_ms
            )
            self.database = self.client[self.database_name]

            # Test connection
            await self.client.admin.command('ping')
            logger.info("Successfully connected to MongoDB", database=self.database_name)

            await self._create_indexes()

        except ConnectionFailure as e:
            logger.error("Failed to connect to MongoDB", error=str(e))
            raise

    async def disconnect(self) -> None:
        """Close MongoDB connection."""
        if self.client:
            self.client.close()
            self.client = None
            self.database = None
            logger.info("Disconnected from MongoDB")

    async def _create_indexes(self) -> None:
        """
        Create lookup indexes.

        The email index is deliberately not unique: uniqueness is a service
        rule checked before each write.
        """
        try:
            await self.users.create_index("email")
            logger.info("Successfully created MongoDB indexes")
        except Exception as e:
            logger.error("Failed to create indexes", error=str(e))
            raise

    async def health_check(self) -> Dict:
        """
        Perform database health check.

        Returns:
            Dictionary with health status
        """
        if self.database is None:
            return {"status": "unhealthy", "error": "not connected"}

        try:
            await self.database.command("ping")

            users_count = await self.users.count_documents({})
            books_count = await self.books.count_documents({})

            return {
                "status": "healthy",
                "users_count": users_count,
                "books_count": books_count
            }
        except Exception as e:
            logger.error("Database health check failed", error=str(e))
            return {
                "status": "unhealthy",
                "error": str(e)
            }
