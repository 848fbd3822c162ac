# Local application imports
from employee_api.core.config import Settings
from .base_container import BaseContainer
from .providers import (
    DatabaseProvider,
    RepositoryProvider,
    EmployeeProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    Registration order is important:
    1. Database connections (DatabaseProvider)
    2. Repositories (RepositoryProvider) - depends on database
    3. Services (EmployeeProvider) - depend on repositories

    Built once at process start and attached to the FastAPI app; nothing
    looks it up through a module global.
    """

    def __init__(self, settings: Settings) -> None:
        super().__init__()
        self.register_singleton(Settings, settings)
        self.setup()

    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: database → repositories → services
        """
        # Step 1: Register database connections (foundation)
        DatabaseProvider.register(self)

        # Step 2: Register repositories (depends on database)
        RepositoryProvider.register(self)

        # Step 3: Register services (depends on repositories)
        EmployeeProvider.register(self)

    def close(self) -> None:
        """Close the database connection."""
        DatabaseProvider.close(self)
