"""
MongoDB Connection
==================

Owns the MongoDB client for the lifetime of the process.

One instance is built at startup and handed to the repositories that need
it; nothing reaches for the connection through module globals.
"""
import logging
from typing import Optional

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import PyMongoError

from employee_api.core.config import Settings
from employee_api.exceptions import ConfigurationError, StorageError

logger = logging.getLogger(__name__)


class MongoConnection:
    """
    MongoDB client manager.

    Manages the MongoDB connection and provides access to collections.
    ``MongoClient`` is thread-safe, so a single instance is shared by all
    request threads.
    """

    def __init__(self, settings: Settings):
        self._settings = settings
        self._client: Optional[MongoClient] = None
        self._database: Optional[Database] = None

    def connect(self) -> None:
        """
        Open the client and verify the server is reachable.

        Raises:
            ConfigurationError: If MONGO_URI is not configured
            StorageError: If the server cannot be reached
        """
        if self._client is not None:
            return  # Already connected

        mongo_uri = self._settings.mongo_uri
        if not mongo_uri:
            raise ConfigurationError("MONGO_URI not set. Please configure it in your .env file.")

        client = MongoClient(
            mongo_uri,
            serverSelectionTimeoutMS=self._settings.mongo_timeout_ms,
        )
        try:
            client.admin.command("ping")
        except PyMongoError as exc:
            client.close()
            logger.error(f"❌ MongoDB ping failed: {exc}")
            raise StorageError("Failed to connect to MongoDB") from exc

        self._client = client
        self._database = client[self._settings.mongo_database_name]
        logger.info(f"✅ Connected to MongoDB: {self._settings.mongo_database_name}")

    def get_database(self) -> Database:
        """Get MongoDB database instance, connecting on first use."""
        if self._database is None:
            self.connect()
        return self._database

    def get_collection(self, collection_name: str) -> Collection:
        """
        Get a MongoDB collection.

        Args:
            collection_name: Name of the collection

        Returns:
            MongoDB Collection object
        """
        return self.get_database()[collection_name]

    def close(self) -> None:
        """Close MongoDB connection."""
        if self._client:
            self._client.close()
            self._client = None
            self._database = None
            logger.info("🛑 MongoDB connection closed")
