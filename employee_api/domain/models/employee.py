"""
Employee Model
==============

Domain model representing an employee in the system.
This is a pure domain object with no infrastructure dependencies.
"""
from dataclasses import dataclass, replace
from typing import Optional


@dataclass
class Employee:
    """
    Employee domain model.

    ``id`` is assigned by the store on insert and is never taken from
    client input. Every other attribute is replaced as a whole on update.
    """
    first_name: str = ""
    last_name: str = ""
    gender: str = ""
    email: str = ""
    phone_number: str = ""
    job_title: str = ""
    department: str = ""
    id: Optional[str] = None

    def with_id(self, employee_id: str) -> "Employee":
        """Return a copy of this employee carrying the given identifier."""
        return replace(self, id=employee_id)
