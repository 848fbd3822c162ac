# Standard library imports
import os
from typing import Final, Optional
from dotenv import load_dotenv


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults,
    except the MongoDB connection string which must be provided.
    """

    def __init__(self) -> None:
        # Load environment variables from .env file (if present)
        load_dotenv()

        # Database Configuration
        self.mongo_uri: Final[Optional[str]] = os.getenv("MONGO_URI")
        self.mongo_database_name: Final[str] = os.getenv("DB_NAME", "employee_db")
        self.employees_collection: Final[str] = os.getenv("EMPLOYEES_COLLECTION", "employees")

        # Upper bound for a single storage call made on behalf of a request
        self.mongo_timeout_ms: Final[int] = int(os.getenv("MONGO_TIMEOUT_MS", "5000"))

        # HTTP Server Configuration
        self.host: Final[str] = os.getenv("HOST", "0.0.0.0")
        self.port: Final[int] = int(os.getenv("PORT", "3000"))

        # Front-end origin allowed by CORS
        self.client_origin: Final[str] = os.getenv("CLIENT_ORIGIN", "http://localhost:5173")

        # Logging
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO")

    @property
    def mongo_timeout_seconds(self) -> float:
        return self.mongo_timeout_ms / 1000.0


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
