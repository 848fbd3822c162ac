"""
Employee Service
================

Application service that coordinates employee-related operations.
This service orchestrates the employee use cases.
"""
from typing import Any, Dict, List

from employee_api.domain.models.employee import Employee
from employee_api.domain.repositories.employee_repository import EmployeeRepository
from employee_api.application.use_cases.employee import (
    ListEmployeesUseCase,
    GetEmployeeUseCase,
    CreateEmployeeUseCase,
    UpdateEmployeeUseCase,
    DeleteEmployeeUseCase,
)


class EmployeeService:
    """
    Application service for employee operations.

    Holds no per-request state, so one instance serves all requests.
    """

    def __init__(self, employee_repository: EmployeeRepository):
        """
        Initialize service with repository.

        Args:
            employee_repository: Repository for employee persistence
        """
        self._list_use_case = ListEmployeesUseCase(employee_repository)
        self._get_use_case = GetEmployeeUseCase(employee_repository)
        self._create_use_case = CreateEmployeeUseCase(employee_repository)
        self._update_use_case = UpdateEmployeeUseCase(employee_repository)
        self._delete_use_case = DeleteEmployeeUseCase(employee_repository)

    def list_employees(self) -> List[Employee]:
        """List all employees."""
        return self._list_use_case.execute()

    def get_employee(self, employee_id: str) -> Employee:
        """Get an employee by ID."""
        return self._get_use_case.execute(employee_id)

    def create_employee(self, payload: Dict[str, Any]) -> Employee:
        """
        Create an employee from a request payload.

        Args:
            payload: Request body

        Returns:
            Created employee entity with its generated id
        """
        return self._create_use_case.execute(payload)

    def update_employee(self, employee_id: str, payload: Any) -> bool:
        """
        Replace an employee's fields.

        Args:
            employee_id: Raw identifier from the request path
            payload: Request body, raw JSON bytes or already parsed

        Returns:
            True if a stored employee matched, False otherwise
        """
        return self._update_use_case.execute(employee_id, payload)

    def delete_employee(self, employee_id: str) -> bool:
        """
        Delete an employee.

        Args:
            employee_id: Raw identifier from the request path

        Returns:
            True if an employee was deleted, False otherwise
        """
        return self._delete_use_case.execute(employee_id)
