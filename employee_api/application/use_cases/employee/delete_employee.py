"""
Delete Employee Use Case
========================

Business use case for removing an employee.
"""
import logging

from employee_api.domain.repositories.employee_repository import EmployeeRepository
from employee_api.exceptions import InvalidIdentifierError

logger = logging.getLogger(__name__)


class DeleteEmployeeUseCase:
    """Use case for deleting an employee. Deleting a missing id is a no-op."""

    def __init__(self, employee_repository: EmployeeRepository):
        self._repository = employee_repository

    def execute(self, employee_id: str) -> bool:
        """
        Execute the delete employee use case.

        Args:
            employee_id: Raw identifier from the request path

        Returns:
            True if an employee was deleted, False otherwise

        Raises:
            InvalidIdentifierError: If employee_id is not a store identifier
            StorageError: If the delete fails
        """
        if not self._repository.is_valid_id(employee_id):
            raise InvalidIdentifierError(employee_id)

        deleted = self._repository.delete_by_id(employee_id)
        if deleted:
            logger.info(f"🗑️ Employee {employee_id} deleted")
        return deleted
