"""
Update Employee Use Case
========================

Business use case for replacing an existing employee's fields.
"""
import logging
from typing import Any

from employee_api.application.dto.employee_dto import decode_employee
from employee_api.domain.repositories.employee_repository import EmployeeRepository
from employee_api.domain.validation import validate_employee
from employee_api.exceptions import InvalidIdentifierError

logger = logging.getLogger(__name__)


class UpdateEmployeeUseCase:
    """
    Use case for updating an employee.

    Performs a full replacement of every field except the id.
    """

    def __init__(self, employee_repository: EmployeeRepository):
        """
        Initialize use case with repository.

        Args:
            employee_repository: Repository for employee persistence
        """
        self._repository = employee_repository

    def execute(self, employee_id: str, payload: Any) -> bool:
        """
        Execute the update employee use case.

        Args:
            employee_id: Raw identifier from the request path
            payload: Replacement data as raw JSON bytes or a parsed object
                (any id it carries is ignored)

        Returns:
            True if a stored employee matched, False otherwise. Callers
            report success either way.

        Raises:
            InvalidIdentifierError: If employee_id is not a store identifier
            DecodeError: If the payload is malformed
            ValidationError: If any field violates its constraints
            StorageError: If the replace fails
        """
        if not self._repository.is_valid_id(employee_id):
            raise InvalidIdentifierError(employee_id)

        employee = decode_employee(payload)
        validate_employee(employee)

        matched = self._repository.replace_by_id(employee_id, employee)
        if matched:
            logger.info(f"Employee {employee_id} updated")
        else:
            logger.info(f"Employee {employee_id} not found, nothing updated")
        return matched
