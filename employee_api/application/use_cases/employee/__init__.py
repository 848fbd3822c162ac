from .list_employees import ListEmployeesUseCase
from .get_employee import GetEmployeeUseCase
from .create_employee import CreateEmployeeUseCase
from .update_employee import UpdateEmployeeUseCase
from .delete_employee import DeleteEmployeeUseCase

__all__ = [
    "ListEmployeesUseCase",
    "GetEmployeeUseCase",
    "CreateEmployeeUseCase",
    "UpdateEmployeeUseCase",
    "DeleteEmployeeUseCase",
]
