from .employee_dto import (
    EmployeeRequest,
    EmployeeResponse,
    MessageResponse,
    ErrorResponse,
    decode_employee,
)

__all__ = [
    "EmployeeRequest",
    "EmployeeResponse",
    "MessageResponse",
    "ErrorResponse",
    "decode_employee",
]
