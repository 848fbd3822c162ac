from .employee_constraints import (
    ConstraintKind,
    FieldConstraint,
    EMPLOYEE_CONSTRAINTS,
    collect_violations,
    validate_employee,
)

__all__ = [
    "ConstraintKind",
    "FieldConstraint",
    "EMPLOYEE_CONSTRAINTS",
    "collect_violations",
    "validate_employee",
]
