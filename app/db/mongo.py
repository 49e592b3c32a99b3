"""
app/db/mongo.py

Purpose: MongoDB connection setup

- Owns the Motor client with connection pooling
- Five collections: users, tours, bookings, tour_guides, stories
- Health checks and retry logic
- Proper connection lifecycle management (connect on startup, close on shutdown)
"""

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection, AsyncIOMotorDatabase
from pymongo.errors import ConnectionFailure, ServerSelectionTimeoutError
from pymongo.server_api import ServerApi
from fastapi import Request
from typing import Optional
import asyncio

from app.core.config import Settings, settings as default_settings
from app.core.exceptions import DatabaseUnavailableError
from app.core.logging import get_logger
from utils.constants import (
    USERS_COLLECTION,
    TOURS_COLLECTION,
    BOOKINGS_COLLECTION,
    TOUR_GUIDES_COLLECTION,
    STORIES_COLLECTION,
)

logger = get_logger(__name__)


class MongoStore:
    """
    Explicitly owned store handle.

    Created by the application lifespan and handed to route handlers through
    the `get_store` dependency. Collection accessors raise
    DatabaseUnavailableError until connect() has succeeded.
    """

    def __init__(self, config: Optional[Settings] = None):
        self.settings = config or default_settings
        self._client: Optional[AsyncIOMotorClient] = None
        self._database: Optional[AsyncIOMotorDatabase] = None

    @property
    def is_connected(self) -> bool:
        return self._database is not None

    def _create_client(self) -> AsyncIOMotorClient:
        options = dict(
            maxPoolSize=50,
            minPoolSize=10,
            serverSelectionTimeoutMS=5000,
            connectTimeoutMS=10000,
            retryWrites=True,
            retryReads=True,
        )
        if self.settings.MONGODB_STRICT_API:
            options["server_api"] = ServerApi("1", strict=True, deprecation_errors=True)
        return AsyncIOMotorClient(self.settings.mongodb_uri, **options)

    async def connect(self):
        """
        Establishes connection to MongoDB with retry logic.
        Called during application startup, before traffic is accepted.
        """
        if self._client is not None:
            logger.warning("MongoDB client already initialized")
            return

        max_retries = max(1, self.settings.MONGODB_CONNECT_RETRIES)
        retry_delay = self.settings.MONGODB_RETRY_DELAY

        for attempt in range(1, max_retries + 1):
            client = None
            try:
                logger.info(
                    f"Attempting to connect to MongoDB (attempt {attempt}/{max_retries})"
                )

                client = self._create_client()

                # Verify connection
                await client.admin.command("ping")

                self._client = client
                self._database = client[self.settings.MONGODB_DB_NAME]
                logger.info(
                    f"✅ Successfully connected to MongoDB: {self.settings.MONGODB_DB_NAME}"
                )
                return

            except (ConnectionFailure, ServerSelectionTimeoutError) as e:
                if client is not None:
                    client.close()
                logger.error(
                    f"Failed to connect to MongoDB (attempt {attempt}/{max_retries}): {e}"
                )

                if attempt < max_retries:
                    logger.info(f"Retrying in {retry_delay} seconds...")
                    await asyncio.sleep(retry_delay)
                    retry_delay *= 2  # Exponential backoff
                else:
                    logger.critical("Failed to connect to MongoDB after all retries")
                    raise DatabaseUnavailableError(
                        "Could not establish MongoDB connection"
                    ) from e

    async def close(self):
        """
        Closes the MongoDB connection.
        Called during application shutdown.
        """
        if self._client is not None:
            logger.info("Closing MongoDB connection")
            self._client.close()
            self._client = None
            self._database = None
            logger.info("MongoDB connection closed")

    async def ping(self) -> bool:
        """
        Checks if the database connection is healthy.

        Returns:
            True if connection is healthy, False otherwise
        """
        if self._client is None:
            logger.error("MongoDB client not initialized")
            return False
        try:
            await self._client.admin.command("ping")
            return True
        except Exception as e:
            logger.error(f"Database health check failed: {str(e)}")
            return False

    @property
    def database(self) -> AsyncIOMotorDatabase:
        if self._database is None:
            raise DatabaseUnavailableError(
                "Database not initialized. Call connect() during startup."
            )
        return self._database

    def collection(self, name: str) -> AsyncIOMotorCollection:
        return self.database[name]

    @property
    def users(self) -> AsyncIOMotorCollection:
        return self.collection(USERS_COLLECTION)

    @property
    def tours(self) -> AsyncIOMotorCollection:
        return self.collection(TOURS_COLLECTION)

    @property
    def bookings(self) -> AsyncIOMotorCollection:
        return self.collection(BOOKINGS_COLLECTION)

    @property
    def tour_guides(self) -> AsyncIOMotorCollection:
        return self.collection(TOUR_GUIDES_COLLECTION)

    @property
    def stories(self) -> AsyncIOMotorCollection:
        return self.collection(STORIES_COLLECTION)


def get_store(request: Request) -> MongoStore:
    """
    FastAPI dependency returning the store owned by the running application.
    """
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise DatabaseUnavailableError("Database store is not configured")
    return store
