"""
Dependency Container
====================

FastAPI dependencies resolving services from the container attached to
the application at startup.
"""
from fastapi import Request

from employee_api.application.services.employee_service import EmployeeService
from employee_api.di.base_container import BaseContainer


def get_container(request: Request) -> BaseContainer:
    """
    Get the DI container of the running application.

    Returns:
        Container attached to ``app.state`` at startup
    """
    return request.app.state.container


def get_employee_service(request: Request) -> EmployeeService:
    """
    Get employee service instance (singleton).

    Returns:
        EmployeeService instance
    """
    return get_container(request).get(EmployeeService)
