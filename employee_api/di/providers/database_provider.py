from typing import TYPE_CHECKING
from ...core.config import Settings
from ...infrastructure.db.mongo_connection import MongoConnection

if TYPE_CHECKING:
    from ..base_container import BaseContainer


MONGO_CONNECTION = "mongo_connection"


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for all DB connections"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Open the MongoDB connection and register it in the container.
        This is the ONLY place where database connections are created.

        Raises:
            ConfigurationError: If MONGO_URI is missing
            StorageError: If MongoDB cannot be reached
        """
        connection = MongoConnection(container.get(Settings))
        connection.connect()

        container.register_singleton(MONGO_CONNECTION, connection)

    @staticmethod
    def close(container: "BaseContainer") -> None:
        """Close the registered connection, if any."""
        if container.has(MONGO_CONNECTION):
            container.get(MONGO_CONNECTION).close()
