from typing import TYPE_CHECKING
from ...core.config import Settings
from ...domain.repositories.employee_repository import EmployeeRepository
from ...infrastructure.db.mongo_employee_repository import MongoEmployeeRepository
from .database_provider import MONGO_CONNECTION

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all repository implementations.
        Gets database connection from database provider and creates repository instances.
        """
        settings = container.get(Settings)
        connection = container.get(MONGO_CONNECTION)

        # Domain interfaces -> Infrastructure implementations
        container.register_singleton(
            EmployeeRepository,
            MongoEmployeeRepository(
                collection=connection.get_collection(settings.employees_collection),
                timeout_seconds=settings.mongo_timeout_seconds,
            )
        )
