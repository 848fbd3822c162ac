"""
Employee Repository Interface
=============================

Abstract interface for employee data access.
Implementations should be in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from employee_api.domain.models.employee import Employee


class EmployeeRepository(ABC):
    """
    Abstract repository for employee persistence operations.

    This interface defines the contract for employee data access.
    Query construction is an implementation detail of each concrete
    repository. Data operations raise ``StorageError`` on failure.
    """

    @abstractmethod
    def is_valid_id(self, employee_id: str) -> bool:
        """
        Check whether a raw identifier is in the store's accepted format.

        Must not touch the store.

        Args:
            employee_id: Raw identifier (e.g. from a URL path)

        Returns:
            True if the identifier can be used in lookups
        """
        pass

    @abstractmethod
    def find_all(self) -> List[Employee]:
        """
        Find all employees.

        Returns:
            List of employee entities in the store's natural order
        """
        pass

    @abstractmethod
    def find_by_id(self, employee_id: str) -> Optional[Employee]:
        """
        Find an employee by its ID.

        Args:
            employee_id: Unique employee identifier

        Returns:
            Employee entity if found, None otherwise
        """
        pass

    @abstractmethod
    def insert_one(self, employee: Employee) -> str:
        """
        Insert a new employee.

        Args:
            employee: Employee entity to insert (its id is ignored)

        Returns:
            Identifier generated by the store
        """
        pass

    @abstractmethod
    def replace_by_id(self, employee_id: str, employee: Employee) -> bool:
        """
        Replace every field of an existing employee.

        Args:
            employee_id: Unique employee identifier
            employee: Replacement data (its id is ignored)

        Returns:
            True if a document matched, False otherwise
        """
        pass

    @abstractmethod
    def delete_by_id(self, employee_id: str) -> bool:
        """
        Delete an employee.

        Args:
            employee_id: Unique employee identifier

        Returns:
            True if an employee was deleted, False otherwise
        """
        pass
