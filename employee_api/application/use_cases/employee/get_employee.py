"""
Get Employee Use Case
=====================

Business use case for fetching a single employee by identifier.
"""
from employee_api.domain.models.employee import Employee
from employee_api.domain.repositories.employee_repository import EmployeeRepository
from employee_api.exceptions import InvalidIdentifierError, NotFoundError


class GetEmployeeUseCase:
    """Use case for fetching one employee."""

    def __init__(self, employee_repository: EmployeeRepository):
        self._repository = employee_repository

    def execute(self, employee_id: str) -> Employee:
        """
        Execute the get employee use case.

        Args:
            employee_id: Raw identifier from the request path

        Returns:
            The stored employee

        Raises:
            InvalidIdentifierError: If employee_id is not a store identifier
            NotFoundError: If no employee has this identifier
        """
        if not self._repository.is_valid_id(employee_id):
            raise InvalidIdentifierError(employee_id)

        employee = self._repository.find_by_id(employee_id)
        if employee is None:
            raise NotFoundError("Employee", employee_id)
        return employee
