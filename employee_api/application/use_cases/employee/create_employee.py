"""
Create Employee Use Case
========================

Business use case for creating a new employee.
"""
import logging
from typing import Any, Dict

from employee_api.application.dto.employee_dto import decode_employee
from employee_api.domain.models.employee import Employee
from employee_api.domain.repositories.employee_repository import EmployeeRepository
from employee_api.domain.validation import validate_employee

logger = logging.getLogger(__name__)


class CreateEmployeeUseCase:
    """
    Use case for creating an employee.

    Nothing reaches the repository unless the whole record is valid.
    """

    def __init__(self, employee_repository: EmployeeRepository):
        """
        Initialize use case with repository.

        Args:
            employee_repository: Repository for employee persistence
        """
        self._repository = employee_repository

    def execute(self, payload: Dict[str, Any]) -> Employee:
        """
        Execute the create employee use case.

        Args:
            payload: Request body (any id it carries is ignored)

        Returns:
            Created employee with its generated id

        Raises:
            DecodeError: If the payload is malformed
            ValidationError: If any field violates its constraints
            StorageError: If the insert fails
        """
        employee = decode_employee(payload)
        validate_employee(employee)

        employee_id = self._repository.insert_one(employee)
        logger.info(f"Employee {employee_id} created")
        return employee.with_id(employee_id)
