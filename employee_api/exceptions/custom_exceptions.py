"""
Custom exceptions for the application.
Provides specific exception types for different error scenarios.

Every exception carries a machine-readable ``error`` category, a
human-readable ``message`` safe to return to clients, and optional
``details``. Driver or internal error text never goes into ``message``.
"""
from typing import Optional, Any, Dict, List


class AppError(Exception):
    """Base application error."""

    error: str = "internal_error"

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class DecodeError(AppError):
    """Malformed request body (400)."""

    error = "decode_error"

    def __init__(self, message: str = "Cannot parse JSON", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status_code=400, details=details)


class ValidationError(AppError):
    """One or more field constraint violations (400)."""

    error = "validation_error"

    def __init__(self, violations: List[Dict[str, str]], message: str = "Validation failed"):
        self.violations = violations
        super().__init__(
            message,
            status_code=400,
            details={"fields": violations}
        )

    @property
    def fields(self) -> List[str]:
        """Names of the offending fields, in constraint-table order."""
        return [violation["field"] for violation in self.violations]


class InvalidIdentifierError(AppError):
    """Path identifier not in the store's accepted format (400)."""

    error = "invalid_identifier"

    def __init__(self, identifier: str):
        super().__init__(
            "Invalid ID format",
            status_code=400,
            details={"identifier": identifier}
        )


class NotFoundError(AppError):
    """Resource not found error (404)."""

    error = "not_found"

    def __init__(self, resource: str, identifier: Optional[str] = None):
        message = f"{resource} not found"
        if identifier:
            message += f": {identifier}"
        super().__init__(message, status_code=404, details={"resource": resource, "identifier": identifier})


class StorageError(AppError):
    """Underlying persistence failure (500)."""

    error = "storage_error"

    def __init__(self, message: str = "Database operation failed", status_code: int = 500):
        super().__init__(message, status_code=status_code)


class StorageTimeoutError(StorageError):
    """Persistence call exceeded its time budget (504)."""

    error = "storage_timeout"

    def __init__(self, message: str = "Database operation timed out"):
        super().__init__(message, status_code=504)


class ConfigurationError(AppError):
    """Configuration/setup error, fatal at startup."""

    error = "configuration_error"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status_code=500, details=details)
