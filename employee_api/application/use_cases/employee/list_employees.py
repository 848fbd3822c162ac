"""
List Employees Use Case
=======================

Business use case for listing every stored employee.
"""
from typing import List

from employee_api.domain.models.employee import Employee
from employee_api.domain.repositories.employee_repository import EmployeeRepository


class ListEmployeesUseCase:
    """Use case for listing employees."""

    def __init__(self, employee_repository: EmployeeRepository):
        self._repository = employee_repository

    def execute(self) -> List[Employee]:
        """
        Execute the list employees use case.

        Returns:
            All employees in the store's natural order (possibly empty)

        Raises:
            StorageError: If the query or decoding of any record fails
        """
        return self._repository.find_all()
