from .employee_fields import EmployeeFields, Gender

__all__ = ["EmployeeFields", "Gender"]
