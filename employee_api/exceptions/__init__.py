from .custom_exceptions import (
    AppError,
    DecodeError,
    ValidationError,
    InvalidIdentifierError,
    NotFoundError,
    StorageError,
    StorageTimeoutError,
    ConfigurationError,
)

__all__ = [
    "AppError",
    "DecodeError",
    "ValidationError",
    "InvalidIdentifierError",
    "NotFoundError",
    "StorageError",
    "StorageTimeoutError",
    "ConfigurationError",
]
