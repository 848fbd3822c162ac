"""
Employee Constraints
====================

Declarative constraint table for the Employee model and the single routine
that evaluates it.

Each row names a field, a constraint kind and its parameters. Rows for the
same field are evaluated in order and stop at that field's first failure;
different fields are always all checked, so a caller sees every offending
field at once.
"""
from dataclasses import dataclass, field as dataclass_field
from enum import Enum
from typing import Any, Dict, List, Tuple

from email_validator import EmailNotValidError, validate_email

from employee_api.domain.constants.employee_fields import EmployeeFields, Gender
from employee_api.domain.models.employee import Employee
from employee_api.exceptions import ValidationError


class ConstraintKind(str, Enum):
    REQUIRED = "required"
    LENGTH = "length"
    ONE_OF = "one_of"
    EMAIL = "email"


@dataclass(frozen=True)
class FieldConstraint:
    field: str
    kind: ConstraintKind
    params: Dict[str, Any] = dataclass_field(default_factory=dict)


def _name_rules(field_name: str) -> Tuple[FieldConstraint, ...]:
    return (
        FieldConstraint(field_name, ConstraintKind.REQUIRED),
        FieldConstraint(field_name, ConstraintKind.LENGTH, {"min": 2, "max": 50}),
    )


EMPLOYEE_CONSTRAINTS: Tuple[FieldConstraint, ...] = (
    *_name_rules(EmployeeFields.FIRST_NAME),
    *_name_rules(EmployeeFields.LAST_NAME),
    FieldConstraint(EmployeeFields.GENDER, ConstraintKind.REQUIRED),
    FieldConstraint(EmployeeFields.GENDER, ConstraintKind.ONE_OF, {"choices": Gender.ALL}),
    FieldConstraint(EmployeeFields.EMAIL, ConstraintKind.REQUIRED),
    FieldConstraint(EmployeeFields.EMAIL, ConstraintKind.EMAIL),
    FieldConstraint(EmployeeFields.PHONE_NUMBER, ConstraintKind.REQUIRED),
    FieldConstraint(EmployeeFields.PHONE_NUMBER, ConstraintKind.LENGTH, {"min": 10, "max": 15}),
    *_name_rules(EmployeeFields.JOB_TITLE),
    *_name_rules(EmployeeFields.DEPARTMENT),
)


def _check(constraint: FieldConstraint, value: str) -> str:
    """
    Evaluate one constraint against a value.

    Returns:
        Violation message, or an empty string when the constraint holds
    """
    name = constraint.field
    params = constraint.params

    if constraint.kind is ConstraintKind.REQUIRED:
        return "" if value else f"{name} is required"

    if constraint.kind is ConstraintKind.LENGTH:
        if params["min"] <= len(value) <= params["max"]:
            return ""
        return f"{name} must be between {params['min']} and {params['max']} characters"

    if constraint.kind is ConstraintKind.ONE_OF:
        if value in params["choices"]:
            return ""
        return f"{name} must be one of: {', '.join(params['choices'])}"

    if constraint.kind is ConstraintKind.EMAIL:
        try:
            # Syntax only; deliverability would need DNS lookups
            validate_email(value, check_deliverability=False)
        except EmailNotValidError:
            return f"{name} must be a valid email address"
        return ""

    raise ValueError(f"Unknown constraint kind: {constraint.kind}")


def collect_violations(
    employee: Employee,
    constraints: Tuple[FieldConstraint, ...] = EMPLOYEE_CONSTRAINTS,
) -> List[Dict[str, str]]:
    """
    Evaluate a constraint table against an employee.

    Args:
        employee: Employee to check
        constraints: Constraint table (defaults to the Employee table)

    Returns:
        List of ``{"field", "message"}`` violations, empty when valid
    """
    violations: List[Dict[str, str]] = []
    failed_fields = set()

    for constraint in constraints:
        if constraint.field in failed_fields:
            continue
        value = getattr(employee, constraint.field) or ""
        message = _check(constraint, value)
        if message:
            failed_fields.add(constraint.field)
            violations.append({"field": constraint.field, "message": message})

    return violations


def validate_employee(employee: Employee) -> None:
    """
    Validate an employee against the Employee constraint table.

    Raises:
        ValidationError: If any field violates its constraints
    """
    violations = collect_violations(employee)
    if violations:
        raise ValidationError(violations)
